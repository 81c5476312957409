"""
Validate every field of an incoming request and report all problems at once.

Run: python examples/form_validation.py
"""
from dataclasses import dataclass

from validatedpy import Errors, Valid, Invalid, ensure, lift_a, validator, get_logger


@dataclass(frozen=True)
class Signup:
    name: str
    age: int
    email: str


@validator(lambda s, _: Errors.of(f"age: {s!r} is not an integer"))
def parse_age(s):
    return int(s)


check_name = ensure(lambda s: bool(s and s.strip()), lambda s: Errors.of("name: required"))
check_email = ensure(lambda s: "@" in s, lambda s: Errors.of(f"email: {s!r} has no @"))


def validate_signup(form: dict):
    return lift_a(
        Signup,
        check_name(form.get("name", "")),
        parse_age(form.get("age", "")),
        check_email(form.get("email", "")),
    )


def main():
    get_logger().set_level("DEBUG")
    for form in (
        {"name": "Ada", "age": "36", "email": "ada@example.org"},
        {"name": "", "age": "thirty-six", "email": "ada.example.org"},
    ):
        match validate_signup(form):
            case Valid(signup):
                print("200", signup)
            case Invalid(errors):
                print("400", errors.to_list())


if __name__ == "__main__":
    main()
