"""Validators for interactive answers and flag values.

A validator is any callable taking the answer and raising ``ValueError``
with a user-facing message when the answer is unacceptable.
"""

from __future__ import annotations

import ipaddress
import os
import re
from typing import Any, Callable, Iterable
from urllib.parse import urlparse

from rosa.shared.helper import handle_escaped_empty_string
from rosa.shared.ocm.validation import (
    validate_availability_zones_count,
    validate_subnets_count,
)

Validator = Callable[[Any], None]

_CERT_EXTENSION = re.compile(r"\.(pem|ca-bundle|ce?rt?|key)$")


def _strings_only(val: Any) -> str:
    if not isinstance(val, str):
        raise ValueError(f"can only validate strings, got {val}")
    return val


def required(val: Any) -> None:
    if val is None or (isinstance(val, (str, list, dict)) and len(val) == 0):
        raise ValueError("Value is required")


def max_length(length: int) -> Validator:
    def validator(val: Any) -> None:
        if isinstance(val, str) and len(val) > length:
            raise ValueError(f"value is too long. Max length is {length}")

    return validator


def compose(validators: Iterable[Validator]) -> Validator:
    """Combine validators into one that stops at the first failure."""

    chain = list(validators)

    def validator(val: Any) -> None:
        for check in chain:
            check(val)

    return validator


def is_url(val: Any) -> None:
    """Accept absolute URLs and absolute paths; empty answers pass."""

    if val is None:
        return
    s = _strings_only(val)
    if s == "":
        return
    if s.startswith("/"):
        return
    if not urlparse(s).scheme or " " in s:
        raise ValueError(f'parse "{s}": invalid URI for request')


def is_cert(filepath: Any) -> None:
    """Accept a path to an existing certificate or key file."""

    if filepath is None:
        return
    s = _strings_only(filepath)
    if handle_escaped_empty_string(s) == "":
        return
    if not _CERT_EXTENSION.search(s):
        raise ValueError(f"file '{s}' does not have a valid file extension")
    try:
        os.stat(s)
    except FileNotFoundError:
        raise ValueError(f"file '{s}' does not exist on the file system") from None
    except OSError:
        # The path exists but can't be inspected.
        return


def is_cidr(val: Any) -> None:
    s = _strings_only(val)
    if "/" not in s:
        raise ValueError(f"invalid CIDR address: {s}")
    try:
        ipaddress.ip_network(s, strict=False)
    except ValueError:
        raise ValueError(f"invalid CIDR address: {s}") from None


def reg_exp(pattern: str) -> Validator:
    regex = re.compile(pattern)

    def validator(val: Any) -> None:
        s = _strings_only(val)
        if s == "":
            return
        if not regex.search(s):
            raise ValueError(f"{s} does not match regular expression {regex.pattern}")

    return validator


def reg_exp_boolean(pattern: str) -> Validator:
    regex = re.compile(pattern)

    def validator(val: Any) -> None:
        if not isinstance(val, bool):
            raise ValueError(f"can only validate boolean values, got {val}")
        s = "true" if val else "false"
        if not regex.search(s):
            raise ValueError(f"{s} does not match regular expression {regex.pattern}")

    return validator


def subnets_count_validator(multi_az: bool, private_link: bool) -> Validator:
    """Validate a multi-select answer holding the chosen subnets."""

    def validator(answers: Any) -> None:
        if not isinstance(answers, (list, tuple)):
            raise ValueError(f"can only validate a slice of string, got {answers}")
        validate_subnets_count(multi_az, private_link, len(answers))

    return validator


def availability_zones_count_validator(multi_az: bool) -> Validator:
    def validator(answers: Any) -> None:
        if not isinstance(answers, (list, tuple)):
            raise ValueError(f"can only validate a slice of string, got {answers}")
        validate_availability_zones_count(multi_az, len(answers))

    return validator
