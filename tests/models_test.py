import unittest
from huffcodec.models import Symbol, SymbolFrequency, FrequencyModel
from huffcodec.exceptions import EmptyInputError

class TestSymbol(unittest.TestCase):
    def test_equality_and_hash(self):
        s1 = Symbol(b'a')
        s2 = Symbol(b'a')
        s3 = Symbol(b'b')
        self.assertEqual(s1, s2)
        self.assertNotEqual(s1, s3)
        self.assertEqual(hash(s1), hash(s2))

    def test_str_and_repr(self):
        s = Symbol(b'c')
        self.assertIn("b'c'", str(s))
        self.assertIn("b'c'", repr(s))

    def test_value_and_from_int(self):
        self.assertEqual(Symbol(b'a').value, 97)
        self.assertEqual(Symbol.from_int(97), Symbol(b'a'))
        self.assertEqual(Symbol.from_int(255).data, b'\xff')

    def test_invalid_data(self):
        with self.assertRaises(ValueError):
            Symbol('a')
        with self.assertRaises(ValueError):
            Symbol(b'ab')
        with self.assertRaises(ValueError):
            Symbol(b'')
        with self.assertRaises(ValueError):
            Symbol.from_int(256)

class TestSymbolFrequency(unittest.TestCase):
    def test_str_and_repr(self):
        s = Symbol(b'x')
        sf = SymbolFrequency(s, 10)
        expected = f"[{s}, 10]"
        self.assertEqual(str(sf), expected)
        self.assertEqual(repr(sf), expected)

class TestFrequencyModel(unittest.TestCase):
    def test_count(self):
        symbols = [Symbol(b'a'), Symbol(b'a'), Symbol(b'a'), Symbol(b'b')]
        model = FrequencyModel.count(symbols)
        self.assertEqual(model.get_frequency(Symbol(b'a')), 3)
        self.assertEqual(model.get_frequency(Symbol(b'b')), 1)
        self.assertEqual(model.get_size(), 2)
        self.assertEqual(model.total(), 4)

    def test_count_bytes_matches_count(self):
        data = b"mississippi"
        by_symbols = FrequencyModel.count([Symbol(bytes((b,))) for b in data])
        self.assertEqual(FrequencyModel.count_bytes(data), by_symbols)
        self.assertEqual(by_symbols.to_dict(), {
            Symbol(b'i'): 4, Symbol(b'm'): 1, Symbol(b'p'): 2, Symbol(b's'): 4
        })

    def test_symbols_sorted_by_value(self):
        model = FrequencyModel.count_bytes(b"cab")
        self.assertEqual(model.get_symbols(), [Symbol(b'a'), Symbol(b'b'), Symbol(b'c')])

    def test_every_symbol_counted_once(self):
        data = bytes(range(256)) * 3
        model = FrequencyModel.count_bytes(data)
        self.assertEqual(len(model), 256)
        self.assertTrue(all(sf.frequency == 3 for sf in model.frequencies()))

    def test_contains(self):
        model = FrequencyModel.count_bytes(b"ab")
        self.assertTrue(model.contains(Symbol(b'a')))
        self.assertFalse(model.contains(Symbol(b'z')))
        with self.assertRaises(KeyError):
            model.get_frequency(Symbol(b'z'))

    def test_to_dict_is_a_copy(self):
        model = FrequencyModel.count_bytes(b"ab")
        counts = model.to_dict()
        counts[Symbol(b'a')] = 100
        self.assertEqual(model.get_frequency(Symbol(b'a')), 1)

    def test_empty_input(self):
        with self.assertRaises(EmptyInputError):
            FrequencyModel.count([])
        with self.assertRaises(EmptyInputError):
            FrequencyModel.count_bytes(b"")

    def test_invalid_counts(self):
        with self.assertRaises(ValueError):
            FrequencyModel({Symbol(b'a'): 0})
        with self.assertRaises(ValueError):
            FrequencyModel({b'a': 1})

if __name__ == '__main__':
    unittest.main()
