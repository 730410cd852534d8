"""GUID contracts for ``uuid.UUID`` subjects. The nil UUID counts as empty."""

from __future__ import annotations
from typing import Optional
from uuid import UUID

from ..contracts.codes import GuidCodes
from ..core.evaluator import Contracts, describe

NIL_UUID = UUID(int=0)


class GuidContracts(Contracts[Optional[UUID]]):

    def be_empty(self, because: str = "", *because_args) -> GuidContracts:
        return self.assert_that(
            lambda s: s == NIL_UUID,
            GuidCodes.BE_EMPTY,
            lambda: f"Expected empty GUID but found {describe(self.subject)}",
            self._context(because, because_args, actual=self.subject),
        )

    def not_be_empty(self, because: str = "", *because_args) -> GuidContracts:
        return self.assert_that(
            lambda s: s is not None and s != NIL_UUID,
            GuidCodes.NOT_BE_EMPTY,
            lambda: (
                "Expected non-empty GUID but found null"
                if self.subject is None
                else "Expected non-empty GUID but found empty GUID"
            ),
            self._context(because, because_args, actual=self.subject),
        )

    def be(self, expected: Optional[UUID], because: str = "", *because_args) -> GuidContracts:
        return self.assert_that(
            lambda s: s == expected,
            GuidCodes.BE,
            lambda: f"Expected GUID {describe(expected)} but found {describe(self.subject)}",
            self._context(because, because_args, expected=expected, actual=self.subject),
        )

    def not_be(self, unexpected: Optional[UUID], because: str = "", *because_args) -> GuidContracts:
        return self.assert_that(
            lambda s: s != unexpected,
            GuidCodes.NOT_BE,
            f"Did not expect GUID {describe(unexpected)}",
            self._context(because, because_args, unexpected=unexpected, actual=self.subject),
        )

    def have_value(self, because: str = "", *because_args) -> GuidContracts:
        return self.assert_that(
            lambda s: s is not None,
            GuidCodes.HAVE_VALUE,
            "Expected a GUID value but found null",
            self._context(because, because_args),
        )

    def not_have_value(self, because: str = "", *because_args) -> GuidContracts:
        return self.assert_that(
            lambda s: s is None,
            GuidCodes.NOT_HAVE_VALUE,
            lambda: f"Did not expect a GUID value but found {self.subject}",
            self._context(because, because_args, actual=self.subject),
        )

    def be_null(self, because: str = "", *because_args) -> GuidContracts:
        return self.not_have_value(because, *because_args)

    def not_be_null(self, because: str = "", *because_args) -> GuidContracts:
        return self.have_value(because, *because_args)
