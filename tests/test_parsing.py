import sys
import tempfile
import unittest
from io import BytesIO
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.parsing.parse import parse_bytes, parse_document  # noqa: E402


class ParsingFacadeTests(unittest.TestCase):
    def test_parse_txt_returns_stable_parsed_doc(self):
        content = "Jane Doe\n- Built APIs\nSKILLS\nPython"
        tmp_file = tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8")
        tmp_path = Path(tmp_file.name)
        try:
            tmp_file.write(content)
            tmp_file.close()

            parsed = parse_document(str(tmp_path))
            self.assertEqual(parsed.source_type, "txt")
            self.assertEqual(parsed.text, content)
            self.assertTrue(parsed.doc_id)
            self.assertEqual(parsed.doc_id, parse_bytes("copy.txt", content.encode("utf-8")).doc_id)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def test_invalid_utf8_is_replaced_with_warning(self):
        parsed = parse_bytes("resume.txt", b"Jane \xff Doe")
        self.assertIn("Jane", parsed.text)
        self.assertEqual(len(parsed.parsing_warnings), 1)

    def test_docx_paragraphs(self):
        from docx import Document

        document = Document()
        document.add_paragraph("Jane Doe")
        document.add_paragraph("")
        document.add_paragraph("SKILLS")
        document.add_paragraph("Python, Go")
        buffer = BytesIO()
        document.save(buffer)

        parsed = parse_bytes("resume.docx", buffer.getvalue())
        self.assertEqual(parsed.source_type, "docx")
        self.assertEqual(parsed.text, "Jane Doe\nSKILLS\nPython, Go")
        self.assertEqual(len(parsed.blocks), 3)

    def test_docx_table_rows_are_kept(self):
        from docx import Document

        document = Document()
        document.add_paragraph("SKILLS")
        table = document.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Python"
        table.rows[0].cells[1].text = "Go"
        buffer = BytesIO()
        document.save(buffer)

        parsed = parse_bytes("resume.docx", buffer.getvalue())
        self.assertEqual(parsed.text, "SKILLS\nPython | Go")

    def test_broken_pdf_reports_warning(self):
        parsed = parse_bytes("resume.pdf", b"not really a pdf")
        self.assertEqual(parsed.text, "")
        self.assertTrue(parsed.parsing_warnings)

    def test_pdf_without_digital_text_is_flagged(self):
        from pypdf import PdfWriter

        writer = PdfWriter()
        writer.add_blank_page(width=612, height=792)
        buffer = BytesIO()
        writer.write(buffer)

        parsed = parse_bytes("scan.pdf", buffer.getvalue())
        self.assertEqual(parsed.source_type, "pdf")
        self.assertEqual(parsed.text, "")
        self.assertTrue(any("scanned" in warning for warning in parsed.parsing_warnings))
        self.assertFalse(parsed.has_text)

    def test_unsupported_and_missing_files(self):
        with self.assertRaises(NotImplementedError):
            parse_bytes("resume.png", b"\x89PNG")
        with self.assertRaises(FileNotFoundError):
            parse_document(str(Path(tempfile.gettempdir()) / "missing-resume.txt"))


if __name__ == "__main__":
    unittest.main()
