"""
Observability Layer

RESPONSIBILITY: Structured logging for contract evaluation
OUTPUTS: structlog events

WHAT THIS LAYER MUST NOT DO:
============================
- Modify contract outcomes
- Raise from inside a logging call
- Configure logging implicitly on import (applications opt in through
  configure_logging)

EVENTS:
=======
- test_framework_resolved   detector picked an exception factory
- contract_failed           a validation-mode failure was recorded
- contract_scope_evaluated  ContractScope.all finished
"""

from __future__ import annotations
from typing import Optional
import logging
import sys

import structlog

from ..config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Route structlog through the stdlib logging module at ``level``."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name),
    )
    logging.getLogger("fluent_contracts").setLevel(getattr(logging, level_name))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
