import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.models.invoice_model import Invoice
from biztime.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = logging.getLogger(__name__)


class InvoiceService:
    """
    Thin data-access layer for invoices.

    Every method takes the request's Session; lookups by id return None
    when no row matches and the route decides what that means.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    # ------------------------------------------------------------
    # Create (unknown comp_code fails on the foreign key)
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: InvoiceCreate) -> Invoice:
        invoice = Invoice(comp_code=payload.comp_code, amt=payload.amt)
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        logger.info("Created invoice %s for %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amount and payment state
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: InvoiceUpdate,
    ) -> Optional[Invoice]:
        """
        Set the amount and, when `paid` is given, move the payment state.

        Paying an unpaid invoice stamps paid_date with today, un-paying
        clears it, and re-sending the current state keeps the old date.
        """
        invoice = self.get_invoice(db, invoice_id)
        if not invoice:
            return None

        invoice.amt = payload.amt

        if payload.paid is not None:
            if payload.paid and not invoice.paid:
                invoice.paid_date = date.today()
            elif not payload.paid:
                invoice.paid_date = None
            invoice.paid = payload.paid

        db.commit()
        db.refresh(invoice)
        logger.info("Updated invoice %s", invoice_id)
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> bool:
        deleted = (
            db.query(Invoice)
            .filter(Invoice.id == invoice_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        if deleted:
            logger.info("Deleted invoice %s", invoice_id)
        return deleted > 0


invoice_service = InvoiceService()
