import unittest

from PyPotGen.Helpers.Comments import IsTranslatorComment, NormalizeTranslatorComment
from PyPotGen.Helpers.Tests import log_input_expected_result, log_test_name
from PyPotGen.Token import Token, TokenKind
from PyPotGen.TranslatorCommentTracker import TranslatorCommentTracker

class TestTranslatorComments(unittest.TestCase):
    normalize_cases = [
        ("/* translators: %s: user name */", "%s: user name"),
        ("// Translators: Greeting", "Greeting"),
        ("# translators: hash style", "hash style"),
        ("/**\n * translators: 1: count\n * 2: name\n */", "1: count 2: name"),
        ("/*\r\n   translators: windows\r\n   line endings */", "windows line endings"),
        ("// see translators: note", "see translators: note"),
        ("/* translators: */", ""),
    ]

    def test_IsTranslatorComment(self):
        log_test_name("IsTranslatorComment")
        cases = [
            ("// translators: hello", True),
            ("/* TRANSLATORS: shout */", True),
            ("// translator note", False),
            ("# just a comment", False),
        ]
        for comment, expected in cases:
            with self.subTest(comment=comment):
                result = IsTranslatorComment(comment)
                log_input_expected_result(comment, expected, result)
                self.assertEqual(result, expected)

    def test_NormalizeTranslatorComment(self):
        log_test_name("NormalizeTranslatorComment")
        for comment, expected in self.normalize_cases:
            with self.subTest(comment=comment):
                result = NormalizeTranslatorComment(comment)
                log_input_expected_result(comment, expected, result)
                self.assertEqual(result, expected)

    def test_Tracker(self):
        log_test_name("TranslatorCommentTracker")
        tracker = TranslatorCommentTracker()

        tracker.Observe(Token(TokenKind.Comment, "// translators: first", 1))
        self.assertEqual(tracker.pending, "first")

        tracker.Observe(Token(TokenKind.Whitespace, "\n  ", 1))
        self.assertEqual(tracker.pending, "first")

        tracker.Observe(Token(TokenKind.Comment, "// translators: second", 2))
        self.assertEqual(tracker.pending, "second")

        self.assertEqual(tracker.Take(), "second")
        self.assertIsNone(tracker.pending)
        self.assertIsNone(tracker.Take())

    def test_TrackerClearedBySignificantTokens(self):
        tracker = TranslatorCommentTracker()
        clearing_tokens = [
            Token(TokenKind.Comment, "// ordinary comment", 2),
            Token(TokenKind.Identifier, "printf", 2),
            Token(TokenKind.Operator, "(", 2),
            Token(TokenKind.Other, "$value", 2),
        ]
        for token in clearing_tokens:
            with self.subTest(token=str(token)):
                tracker.Observe(Token(TokenKind.Comment, "/* translators: hint */", 1))
                tracker.Observe(token)
                self.assertIsNone(tracker.pending)

    def test_TrackerIgnoresEmptyHint(self):
        tracker = TranslatorCommentTracker()
        tracker.Observe(Token(TokenKind.Comment, "/* translators: */", 1))
        self.assertIsNone(tracker.pending)

        tracker.Observe(Token(TokenKind.Comment, "// translators: kept", 1))
        tracker.Reset()
        self.assertIsNone(tracker.pending)

if __name__ == '__main__':
    unittest.main()
