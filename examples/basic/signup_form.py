#!/usr/bin/env python3
"""
Faults Example: validating a signup form

Shows both accumulation policies:
- default: stop at the first failing check
- stacking: run every check and report all failures

Run: python examples/basic/signup_form.py
"""

import logging
import re

from faults import Faults, FaultError


EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate(form: dict, faults: Faults) -> Faults:
    return (
        faults
        .check("username", lambda: None if form.get("username") else FaultError.check_failed("username is required", check="username"))
        .conditionf(form.get("age", 0) < 18, "age %s is below 18", form.get("age"))
        .check("email", lambda: None if EMAIL_RE.match(form.get("email", "")) else ValueError(f"invalid email: {form.get('email')!r}"))
        .review_last_fail("contact", lambda e: isinstance(e, ValueError))
    )


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    form = {"username": "", "age": 16, "email": "nobody"}

    print("First failure only:")
    first = validate(form, Faults())
    print(f"  {first.last_message()}: {first.get_last()}")

    print("\nAll failures:")
    every = validate(form, Faults().enable_stack())
    print(f"  {every.to_json(indent=2)}")


if __name__ == "__main__":
    main()
