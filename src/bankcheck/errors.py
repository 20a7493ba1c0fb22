from __future__ import annotations

from typing import Any, Optional


class BankIdentifierError(Exception):
    """Raised when a string cannot be turned into a bank identifier.

    Every subclass keeps the offending input (as given by the caller, before
    normalization) and builds its message on demand from structured context.
    """

    template = "'{input}' is not a valid {kind}"

    def __init__(self, kind: str, input_string: str, **context: Any):
        super().__init__(input_string)
        self.kind = kind
        self.input_string = input_string
        self.context = context

    def __str__(self) -> str:
        return self.template.format(input=self.input_string, kind=self.kind, **self.context)


class FormatError(BankIdentifierError):
    template = "'{input}' is not a well-formed {kind}"


class UnknownCountryError(BankIdentifierError):
    template = "'{input}' country code is not an ISO 3166-1-alpha-2 code"


class UnsupportedCountryError(BankIdentifierError):
    template = "'{country}' country does not support {kind}"

    @property
    def country(self):
        return self.context["country"]


class InvalidStructureError(BankIdentifierError):
    template = "'{input}' structure is not valid against the {kind} structure used in {rule}"

    @property
    def rule(self):
        return self.context["rule"]


class IncorrectCheckDigitsError(BankIdentifierError):
    template = "'{input}' check digits are incorrect"


class SwiftPatternSyntaxError(ValueError):
    """A SWIFT expression does not follow the ``<count>[!]<class>`` group grammar."""

    def __init__(self, expression: str, reason: Optional[str] = None):
        super().__init__(expression)
        self.expression = expression
        self.reason = reason

    @property
    def input_string(self) -> str:
        return self.expression

    def __str__(self) -> str:
        msg = f"'{self.expression}' is not a valid SWIFT expression"
        if self.reason:
            msg += f": {self.reason}"
        return msg
