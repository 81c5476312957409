import unittest

from validatedpy import (
    Validated, Valid, Invalid, ValidationFailure,
    valid, invalid, fmap, ap, lift_and_map, apply_next, map2, append, validator,
)


def add2(x):
    return lambda y: x + y


@validator(lambda s, _: [f"{s} is not an integer"])
def parse_int(s):
    return int(s)


class TestFunctor(unittest.TestCase):
    def test_identity_law(self):
        for a in (0, -3, "x", (1, 2), None):
            with self.subTest(a=a):
                self.assertEqual(fmap(Valid(a), lambda x: x), Valid(a))

    def test_invalid_passes_through_untouched(self):
        errs = ["bad"]
        calls = []
        r = fmap(Invalid(errs), lambda x: calls.append(x))
        self.assertEqual(r, Invalid(["bad"]))
        self.assertIs(r.errors, errs)
        self.assertEqual(calls, [])

    def test_map_method_matches_fmap(self):
        self.assertEqual(Valid(2).map(lambda x: x + 1), Valid(3))
        self.assertEqual(Invalid(["e"]).map(lambda x: x + 1), Invalid(["e"]))

    def test_parse_int_scenarios(self):
        self.assertEqual(fmap(parse_int("-20"), abs), Valid(20))
        self.assertEqual(
            fmap(parse_int("negative twenty"), abs),
            Invalid(["negative twenty is not an integer"]),
        )

    def test_variants_are_distinct_and_frozen(self):
        self.assertNotEqual(Valid(1), Invalid(1))
        self.assertTrue(Valid(1).is_valid())
        self.assertTrue(Invalid([]).is_invalid())
        with self.assertRaises(AttributeError):
            Valid(1).value = 2  # type: ignore[misc]

    def test_non_validated_rejected(self):
        with self.assertRaises(TypeError):
            fmap(3, abs)  # type: ignore[arg-type]


class TestApplicative(unittest.TestCase):
    def test_case_table(self):
        g = lambda x: x * 10
        self.assertEqual(ap(Invalid(["a"]), Invalid(["f"])), Invalid(["a", "f"]))
        self.assertEqual(ap(Invalid(["a"]), Valid(g)), Invalid(["a"]))
        self.assertEqual(ap(Valid(1), Invalid(["f"])), Invalid(["f"]))
        self.assertEqual(ap(Valid(1), Valid(g)), Valid(10))

    def test_accumulation_law(self):
        samples = [(["x"], ["y"]), ([], ["y"]), (("a", "b"), ("c",)), ("ab", "cd")]
        for e1, e2 in samples:
            with self.subTest(e1=e1, e2=e2):
                self.assertEqual(ap(Invalid(e1), Invalid(e2)), Invalid(append(e1, e2)))

    def test_inputs_not_mutated(self):
        e1, e2 = ["a"], ["b"]
        ap(Invalid(e1), Invalid(e2))
        self.assertEqual(e1, ["a"])
        self.assertEqual(e2, ["b"])

    def test_direct_ap_scenarios(self):
        self.assertEqual(ap(parse_int("20"), fmap(parse_int("22"), add2)), Valid(42))
        self.assertEqual(
            ap(parse_int("twenty"), fmap(parse_int("22"), add2)),
            Invalid(["twenty is not an integer"]),
        )
        # argument errors ahead of the function holder's
        self.assertEqual(
            ap(parse_int("twenty"), fmap(parse_int("twenty-two"), add2)),
            Invalid(["twenty is not an integer", "twenty-two is not an integer"]),
        )

    def test_custom_combine(self):
        r = ap(Invalid({"a"}), Invalid({"b"}), combine=lambda x, y: x | y)
        self.assertEqual(r, Invalid({"a", "b"}))
        self.assertEqual(Invalid(1).ap(Invalid(2), combine=lambda x, y: x + y), Invalid(3))

    def test_ap_requires_validated(self):
        with self.assertRaises(TypeError):
            ap(Valid(1), lambda x: x)  # type: ignore[arg-type]


class TestPipeline(unittest.TestCase):
    def test_named_operators(self):
        self.assertEqual(apply_next(lift_and_map(add2, parse_int("20")), parse_int("22")), Valid(42))
        self.assertEqual(
            apply_next(lift_and_map(add2, parse_int("twenty")), parse_int("22")),
            Invalid(["twenty is not an integer"]),
        )

    def test_pipeline_error_order_is_reversed(self):
        r = apply_next(lift_and_map(add2, parse_int("twenty")), parse_int("twenty-two"))
        self.assertEqual(r, Invalid(["twenty-two is not an integer", "twenty is not an integer"]))

    def test_lift_then_accumulate(self):
        r = apply_next(lift_and_map(add2, fmap(parse_int("-20"), abs)), parse_int("22"))
        self.assertEqual(r, Valid(42))

    def test_infix_operators(self):
        self.assertEqual(add2 % parse_int("20") * parse_int("22"), Valid(42))
        self.assertEqual(add2 % (abs % parse_int("-20")) * parse_int("22"), Valid(42))
        self.assertEqual(abs % parse_int("-20"), Valid(20))
        self.assertEqual(
            add2 % parse_int("twenty") * parse_int("twenty-two"),
            Invalid(["twenty-two is not an integer", "twenty is not an integer"]),
        )

    def test_three_argument_chain(self):
        add3 = lambda x: lambda y: lambda z: x + y + z
        self.assertEqual(add3 % Valid(1) * Valid(2) * Valid(3), Valid(6))
        r = add3 % Invalid(["x"]) * Valid(2) * Invalid(["z"])
        self.assertEqual(r, Invalid(["z", "x"]))

    def test_mul_with_non_validated_is_type_error(self):
        with self.assertRaises(TypeError):
            Valid(add2) * 3  # type: ignore[operator]


class TestHelpers(unittest.TestCase):
    def test_constructors(self):
        self.assertEqual(valid(1), Valid(1))
        self.assertEqual(invalid(["e"]), Invalid(["e"]))
        self.assertEqual(Validated.invalid_one("e"), Invalid(["e"]))

    def test_fold_and_get(self):
        self.assertEqual(Valid(2).fold(len, lambda v: v * 2), 4)
        self.assertEqual(Invalid(["a", "b"]).fold(len, lambda v: v * 2), 2)
        self.assertEqual(Valid(5).get(), 5)
        with self.assertRaises(ValidationFailure) as cm:
            Invalid(["nope"]).get()
        self.assertEqual(cm.exception.errors, ["nope"])
        self.assertEqual(Invalid(["nope"]).get_or_else(0), 0)

    def test_map_errors(self):
        self.assertEqual(Invalid(["a"]).map_errors(len), Invalid(1))
        self.assertEqual(Valid(1).map_errors(len), Valid(1))

    def test_combine_and_map2_keep_left_to_right(self):
        self.assertEqual(Valid(2).combine(Valid(3)), Valid((2, 3)))
        self.assertEqual(Invalid(["e1"]).combine(Invalid(["e2"])), Invalid(["e1", "e2"]))
        self.assertEqual(map2(Valid(2), Valid(5), lambda a, b: a + b), Valid(7))
        self.assertEqual(map2(Valid(2), Invalid(["b"]), lambda a, b: a + b), Invalid(["b"]))

    def test_match_statement(self):
        def describe(v):
            match v:
                case Valid(x):
                    return f"ok:{x}"
                case Invalid(errs):
                    return f"bad:{len(errs)}"
        self.assertEqual(describe(Valid(1)), "ok:1")
        self.assertEqual(describe(Invalid(["a", "b"])), "bad:2")


if __name__ == "__main__":
    unittest.main()
