"""Alphabet and cycle-notation permutations."""
import unittest

from alphabet_and_permutation import Alphabet, Permutation
from errors import InvalidSymbol, MalformedAlphabet, MalformedPermutation
from suites import Alpha26

ROTOR_I = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"


# ── Alphabet ─────────────────────────────────────────────────────────────────

class TestAlphabet(unittest.TestCase):

    def setUp(self):
        self.alpha = Alphabet("ABCD")

    def test_size_and_lookup(self):
        self.assertEqual(self.alpha.size(), 4)
        self.assertEqual(len(self.alpha), 4)
        self.assertEqual(self.alpha.to_index("C"), 2)
        self.assertEqual(self.alpha.to_symbol(3), "D")

    def test_contains(self):
        self.assertTrue(self.alpha.contains("A"))
        self.assertFalse(self.alpha.contains("E"))
        self.assertIn("B", self.alpha)

    def test_out_of_range(self):
        with self.assertRaises(InvalidSymbol):
            self.alpha.to_index("E")
        with self.assertRaises(InvalidSymbol):
            self.alpha.to_symbol(4)
        with self.assertRaises(InvalidSymbol):
            self.alpha.to_symbol(-1)

    def test_duplicate_symbol(self):
        with self.assertRaises(MalformedAlphabet):
            Alphabet("ABCA")

    def test_reserved_and_empty(self):
        for bad in ("", "AB(", "A)B", "AB*", ["A", "BC"]):
            with self.subTest(bad=bad):
                with self.assertRaises(MalformedAlphabet):
                    Alphabet(bad)

    def test_whitespace_symbol(self):
        alpha = Alphabet("AB C")
        self.assertEqual(alpha.size(), 4)
        self.assertEqual(alpha.to_index(" "), 2)
        perm = Permutation("(AC)", alpha)
        self.assertEqual(perm.permute_symbol(" "), " ")

    def test_equality(self):
        self.assertEqual(Alphabet("ABCD"), self.alpha)
        self.assertNotEqual(Alphabet("ABDC"), self.alpha)


# ── Permutation ──────────────────────────────────────────────────────────────

class TestPermutation(unittest.TestCase):

    def setUp(self):
        self.alpha = Alphabet("ABCD")
        self.perm = Permutation("(BACD)", self.alpha)

    def test_permute(self):
        self.assertEqual(self.perm.permute(1), 0)   # B -> A
        self.assertEqual(self.perm.permute(0), 2)   # A -> C
        self.assertEqual(self.perm.permute(3), 1)   # D -> B, wraps the cycle

    def test_invert(self):
        self.assertEqual(self.perm.invert(0), 1)
        self.assertEqual(self.perm.invert(1), 3)

    def test_symbols(self):
        self.assertEqual(self.perm.permute_symbol("B"), "A")
        self.assertEqual(self.perm.invert_symbol("B"), "D")

    def test_indices_are_wrapped(self):
        self.assertEqual(self.perm.permute(-4), self.perm.permute(0))
        self.assertEqual(self.perm.invert(5), self.perm.invert(1))

    def test_wrap(self):
        self.assertEqual(self.perm.wrap(-1), 3)
        self.assertEqual(self.perm.wrap(9), 1)
        for x in range(-60, 60):
            w = self.perm.wrap(x)
            self.assertTrue(0 <= w < 4)
            self.assertEqual(self.perm.wrap(w), w)

    def test_missing_symbols_fixed(self):
        perm = Permutation("(BAC)", self.alpha)
        self.assertEqual(perm.permute(3), 3)
        self.assertEqual(perm.invert(3), 3)
        self.assertEqual(perm.cycles, ("BAC", "D"))

    def test_whitespace_between_cycles(self):
        perm = Permutation("  (AB)\n\t(CD) ", self.alpha)
        self.assertEqual(perm.permute_symbol("D"), "C")

    def test_identity(self):
        perm = Permutation("", self.alpha)
        self.assertEqual([perm.permute(i) for i in range(4)], [0, 1, 2, 3])
        self.assertFalse(perm.derangement())

    def test_derangement(self):
        self.assertTrue(self.perm.derangement())
        self.assertTrue(Permutation("(AB) (CD)", self.alpha).derangement())
        self.assertFalse(Permutation("(BAC)", self.alpha).derangement())

    def test_size_and_alphabet(self):
        self.assertEqual(self.perm.size(), 4)
        self.assertIs(self.perm.alphabet, self.alpha)

    def test_malformed(self):
        for bad in ("(AB)(BC)", "(ABA)", "(A B)", "(AB", "AB)", "((AB))",
                    "(AZ)", "()", "AB", "(AB) C"):
            with self.subTest(bad=bad):
                with self.assertRaises(MalformedPermutation):
                    Permutation(bad, self.alpha)


class TestPermutationAlgebra(unittest.TestCase):

    def test_inverse_both_ways(self):
        alpha = Alphabet(Alpha26)
        for cycles in (ROTOR_I, "(AE) (BN) (CK)", "(ABCDEFGHIJKLMNOPQRSTUVWXYZ)", ""):
            perm = Permutation(cycles, alpha)
            for i in range(26):
                self.assertEqual(perm.permute(perm.invert(i)), i)
                self.assertEqual(perm.invert(perm.permute(i)), i)

    def test_rotor_i_table(self):
        perm = Permutation(ROTOR_I, Alphabet(Alpha26))
        wiring = "".join(perm.permute_symbol(ch) for ch in Alpha26)
        self.assertEqual(wiring, "EKMFLGDQVZNTOWYHXUSPAIBRCJ")


if __name__ == "__main__":
    unittest.main()
