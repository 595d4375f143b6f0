"""QR code images for attendee tickets."""
import io

import qrcode
from qrcode.constants import ERROR_CORRECT_M


def render_qr_png(payload: str, box_size: int = 10, border: int = 4) -> bytes:
    """PNG bytes of a QR code encoding ``payload`` (the attendee id)."""
    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, box_size=box_size, border=border)
    qr.add_data(payload)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
