"""
Basic validation: map over one validated input, accumulate over several.

Run: python examples/basic_validation.py
"""
from validatedpy import ap, apply_next, fmap, lift_and_map, validator


def add2(x):
    return lambda y: x + y


@validator(lambda s, _: [f"{s} is not an integer"])
def parse_int(s):
    return int(s)


def main():
    # Functor: abs runs only for a valid parse
    print(fmap(parse_int("-20"), abs))                 # Valid(value=20)
    print(fmap(parse_int("negative twenty"), abs))     # Invalid(errors=[...])

    # Applicative, nested style: argument errors come first
    print(ap(parse_int("twenty"), fmap(parse_int("twenty-two"), add2)))

    # Pipeline style: each new argument's errors go ahead of earlier ones
    print(apply_next(lift_and_map(add2, parse_int("twenty")), parse_int("twenty-two")))

    # Infix sugar for the same pipeline
    print(add2 % (abs % parse_int("-20")) * parse_int("22"))   # Valid(value=42)


if __name__ == "__main__":
    main()
