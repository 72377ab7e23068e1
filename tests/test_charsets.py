import unittest
from strtools import charsets

class TestCharacterSets(unittest.TestCase):
    def test_combined_sets_concatenate_parts(self):
        self.assertEqual(charsets.ALPHA, charsets.ALPHA_UPPER + charsets.ALPHA_LOWER)
        self.assertEqual(charsets.ALPHA_AND_DIGITS, charsets.ALPHA + charsets.DIGITS)
        self.assertEqual(charsets.ALPHA_LOWER_AND_DIGITS, 'abcdefghijklmnopqrstuvwxyz0123456789')
        self.assertEqual(charsets.ALPHA_UPPER_AND_DIGITS, 'ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789')

    def test_hex_lower(self):
        self.assertEqual(charsets.HEX_LOWER, '0123456789abcdef')

    def test_mapping_is_read_only(self):
        with self.assertRaises(TypeError):
            charsets.CHARACTER_SETS['DIGITS'] = 'abc'
        self.assertEqual(charsets.CHARACTER_SETS['DIGITS'], '0123456789')

class TestCharacterSetLookup(unittest.TestCase):
    def test_lookup_ignores_case(self):
        self.assertEqual(charsets.character_set('alpha_upper'), charsets.ALPHA_UPPER)

    def test_unknown_name(self):
        with self.assertRaises(KeyError):
            charsets.character_set('EMOJI')
