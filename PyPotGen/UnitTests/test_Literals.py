import unittest

from PyPotGen.Helpers.Literals import DecodeDoubleQuoted, DecodeSingleQuoted, ResolveLiteral
from PyPotGen.Helpers.Tests import log_input_expected_result, log_test_name
from PyPotGen.Tokenizer import Tokenizer

def resolve(expression : str) -> str|None:
    tokens = Tokenizer().Tokenize(f"<?php {expression}")
    return ResolveLiteral(tokens[1:])

class TestLiterals(unittest.TestCase):
    resolve_cases = [
        ("'Hello ' . 'World'", "Hello World"),
        ('"Tab\\there"', "Tab\there"),
        ("'It\\'s'", "It's"),
        ("'C:\\\\path\\n'", "C:\\path\\n"),
        ('"Price: \\$5"', "Price: $5"),
        ('"Costs $5"', "Costs $5"),
        ('"\\x41\\101\\u{1F600}"', "AA\U0001F600"),
        ('"caf\\xc3\\xa9"', "caf\u00e9"),
        ('"Unknown \\q escape"', "Unknown \\q escape"),
        ("'Line' . \"\\n\" . 'Two'", "Line\nTwo"),
        ("'a' /* note */ . 'b'", "ab"),
        ("( 'Hello' )", "Hello"),
        ('"Hello $name"', None),
        ('"{$a}"', None),
        ('"${a}"', None),
        ("$text", None),
        ("'a' . $b", None),
        ("strtoupper( 'a' )", None),
        ("''", None),
        ("", None),
        ("SOME_CONSTANT", None),
    ]

    def test_ResolveLiteral(self):
        log_test_name("ResolveLiteral")
        for expression, expected in self.resolve_cases:
            with self.subTest(expression=expression):
                result = resolve(expression)
                log_input_expected_result(expression, expected, result)
                self.assertEqual(result, expected)

    def test_DecodeSingleQuoted(self):
        log_test_name("DecodeSingleQuoted")
        cases = [
            ("plain", "plain"),
            ("It\\'s", "It's"),
            ("back\\\\slash", "back\\slash"),
            ("keep \\n and \\t", "keep \\n and \\t"),
            ("$var {$x}", "$var {$x}"),
            ("crlf\r\nbody", "crlf\nbody"),
            ("old\rmac", "old\nmac"),
        ]
        for body, expected in cases:
            with self.subTest(body=body):
                result = DecodeSingleQuoted(body)
                log_input_expected_result(body, expected, result)
                self.assertEqual(result, expected)

    def test_DecodeDoubleQuoted(self):
        log_test_name("DecodeDoubleQuoted")
        cases = [
            ("line\\nbreak", "line\nbreak"),
            ("crlf\r\nbody", "crlf\nbody"),
            ("return\\rescape", "return\rescape"),
            ("quote \\\" and \\\\", "quote \" and \\"),
            ("escaped \\$var", "escaped $var"),
            ("\\\\$var", None),
            ("{$obj->name}", None),
        ]
        for body, expected in cases:
            with self.subTest(body=body):
                result = DecodeDoubleQuoted(body)
                log_input_expected_result(body, expected, result)
                self.assertEqual(result, expected)

if __name__ == '__main__':
    unittest.main()
