"""HTML to PDF rendering with xhtml2pdf"""

import io
import logging

from xhtml2pdf import pisa


logger = logging.getLogger(__name__)


class PdfRenderError(RuntimeError):
    """Raised when xhtml2pdf reports errors for a document."""


def render_pdf(html: str) -> bytes:
    """Render a complete HTML document to PDF bytes."""
    result = io.BytesIO()
    pisa_status = pisa.CreatePDF(html, dest=result, encoding='utf-8')
    if pisa_status.err:
        raise PdfRenderError(f"PDF generation error: {pisa_status.err}")
    logger.debug("Generated %d bytes of PDF", result.getbuffer().nbytes)
    return result.getvalue()
