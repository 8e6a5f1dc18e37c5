import io
import PyPDF2
import pdfplumber
import logging
from hackathon_scorer.errors import DocumentError

class PDFParser:
    """
    PDF Text Extraction with fallback strategies
    """

    def extract_text_from_bytes(self, content: bytes) -> str:
        """
        Extract text from an uploaded PDF.

        pdfplumber first, PyPDF2 when pdfplumber fails or finds no text. A
        readable PDF without any text layer gives back an empty string.
        """
        if not content:
            raise DocumentError("Document is empty")

        errors = []

        try:
            text = PDFParser._extract_with_pdfplumber(content)
            if text.strip():
                logging.info(f"Extracted {len(text)} char using pdfplumber")
                return text
        except Exception as e:
            logging.error(f"pdfplumber failed: {e}")
            errors.append(e)

        try:
            text = PDFParser._extract_with_pdf2(content)
            logging.info(f"Extracted {len(text)} char using PyPDF2")
            return text
        except Exception as e:
            logging.error(f"PyPDF2 failed: {e}")
            errors.append(e)

        raise DocumentError(f"Could not extract text from document: {errors[-1]}")

    @staticmethod
    def _extract_with_pdfplumber(content: bytes) -> str:
        """Extract text using pdfplumber"""
        text_part = []

        with pdfplumber.open(io.BytesIO(content)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_part.append(page_text)

        return "\n\n".join(text_part)

    @staticmethod
    def _extract_with_pdf2(content: bytes) -> str:
        """Extract text using PyPDF2"""
        text_parts = []

        reader = PyPDF2.PdfReader(io.BytesIO(content))
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

        return "\n\n".join(text_parts)

def get_pdf_parser() -> PDFParser:
    """Get PDFParser instance"""
    return PDFParser()
