"""
QR code generation service
"""

import io
import qrcode

from app.core.config import settings

class QRService:
    """Service for generating QR codes"""

    @staticmethod
    def get_qr_url() -> str:
        """URL the check-in desk QR code points at"""
        return f"{settings.BASE_URL.rstrip('/')}/"

    @staticmethod
    def generate_frontend_qr(format: str = 'PNG') -> bytes:
        """Generate QR code for the registration/check-in front-end"""
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=4,
        )
        qr.add_data(QRService.get_qr_url())
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buffer = io.BytesIO()
        img.save(buffer, format=format)

        return buffer.getvalue()
