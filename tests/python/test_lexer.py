import io
from unittest import TestCase

from trecparse.core.cursor import ByteCursor
from trecparse.core.lexer import (
    DOC,
    DOC_END,
    closing_tag,
    consume_any_tag,
    consume_error,
    consume_exact,
    read_body,
    read_token,
)


def rest(cursor: ByteCursor) -> bytes:
    out = bytearray()
    while (ch := cursor.get()) is not None:
        out.append(ch)
    return bytes(out)


class TestConsumeExact(TestCase):
    def test_correct_tag(self):
        cursor = ByteCursor.from_bytes(b"<DOC>")
        self.assertTrue(consume_exact(cursor, DOC))
        self.assertTrue(cursor.at_eof())

    def test_incorrect_at_any_position(self):
        for data in (b"DOC>", b"<LOC>", b"<DEC>", b"<DOK>", b"<DOC", b"<DO"):
            with self.subTest(data=data):
                cursor = ByteCursor.from_bytes(data)
                self.assertFalse(consume_exact(cursor, DOC))
                self.assertEqual(rest(cursor), data)

    def test_incorrect_across_chunks(self):
        cursor = ByteCursor(io.BytesIO(b"<DOK>"), chunk_size=1)
        self.assertFalse(consume_exact(cursor, DOC))
        self.assertEqual(rest(cursor), b"<DOK>")

    def test_skip_whitespace(self):
        cursor = ByteCursor.from_bytes(b" \t\r<DOC>")
        self.assertTrue(consume_exact(cursor, DOC))
        self.assertTrue(cursor.at_eof())


class TestConsumeAnyTag(TestCase):
    def test_correct_tag(self):
        cursor = ByteCursor.from_bytes(b"<DOC>")
        self.assertEqual(consume_any_tag(cursor), b"DOC")
        self.assertTrue(cursor.at_eof())

    def test_not_a_tag(self):
        cursor = ByteCursor.from_bytes(b"DOC>")
        self.assertFalse(consume_exact(cursor, DOC))
        self.assertIsNone(consume_any_tag(cursor))
        self.assertEqual(rest(cursor), b"DOC>")

    def test_skip_whitespace(self):
        cursor = ByteCursor.from_bytes(b" \t\r<DOC>")
        self.assertEqual(consume_any_tag(cursor), b"DOC")
        self.assertTrue(cursor.at_eof())

    def test_attributes_are_dropped(self):
        cursor = ByteCursor.from_bytes(b'<IGNORED attr="val" other=1>body')
        self.assertEqual(consume_any_tag(cursor), b"IGNORED")
        self.assertEqual(rest(cursor), b"body")

    def test_unterminated_tag(self):
        cursor = ByteCursor.from_bytes(b"<TEXT")
        self.assertIsNone(consume_any_tag(cursor))


class TestReadToken(TestCase):
    def test_stops_at_whitespace(self):
        cursor = ByteCursor.from_bytes(b"  b2e89334-33f9 </DOCNO>")
        self.assertEqual(read_token(cursor), b"b2e89334-33f9")
        self.assertEqual(rest(cursor), b" </DOCNO>")

    def test_stops_at_tag(self):
        cursor = ByteCursor.from_bytes(b"GX000-00-0000000</DOCNO>")
        self.assertEqual(read_token(cursor), b"GX000-00-0000000")
        self.assertEqual(rest(cursor), b"</DOCNO>")


class TestReadBody(TestCase):
    def test_before_tag(self):
        cursor = ByteCursor.from_bytes(b"text</DOC>rest")
        self.assertEqual(read_body(cursor, DOC_END), b"text")
        self.assertEqual(rest(cursor), b"rest")

    def test_at_the_end(self):
        cursor = ByteCursor.from_bytes(b"text")
        self.assertIsNone(read_body(cursor, DOC_END))
        self.assertTrue(cursor.at_eof())

    def test_with_brackets(self):
        cursor = ByteCursor.from_bytes(b"test <a>link</a> </DOC>rest")
        self.assertEqual(read_body(cursor, DOC_END), b"test <a>link</a> ")
        self.assertEqual(rest(cursor), b"rest")

    def test_with_brackets_small_chunks(self):
        for chunk_size in range(1, 8):
            with self.subTest(chunk_size=chunk_size):
                cursor = ByteCursor(io.BytesIO(b"a < b </DO </DOCS </DOC>rest"), chunk_size=chunk_size)
                self.assertEqual(read_body(cursor, DOC_END), b"a < b </DO </DOCS ")
                self.assertEqual(rest(cursor), b"rest")

    def test_first_closing_tag_wins(self):
        # nested elements with the same name are not tracked
        cursor = ByteCursor.from_bytes(b"<TEXT>inner</TEXT>outer</TEXT>")
        self.assertEqual(read_body(cursor, closing_tag(b"TEXT")), b"<TEXT>inner")
        self.assertEqual(rest(cursor), b"outer</TEXT>")

    def test_trailing_bracket(self):
        cursor = ByteCursor.from_bytes(b"text <")
        self.assertIsNone(read_body(cursor, DOC_END))


class TestConsumeError(TestCase):
    def test_context_is_rest_of_line(self):
        cursor = ByteCursor.from_bytes(b"<DCHDR>\nhttp://example.com\n")
        error = consume_error(cursor, b"<DOCHDR>")
        self.assertEqual(error.expected, "<DOCHDR>")
        self.assertEqual(error.context, "<DCHDR>")
        self.assertEqual(error.message, "Could not consume <DOCHDR> in context: <DCHDR>")
        self.assertEqual(rest(cursor), b"<DCHDR>\nhttp://example.com\n")

    def test_context_is_bounded(self):
        cursor = ByteCursor.from_bytes(b"x" * 1000)
        error = consume_error(cursor, b"<DOC>", context_size=10)
        self.assertEqual(error.context, "x" * 10)
