"""Bill preview package."""

from service_charge.preview.builder import (
    BillPreview,
    GarageLine,
    PreviewRow,
    build_bill_preview,
)

__all__ = [
    "BillPreview",
    "GarageLine",
    "PreviewRow",
    "build_bill_preview",
]
