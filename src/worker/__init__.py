"""Background workers for the ledger service"""
from .ledger_reconciler import LedgerReconcilerWorker
from .pending_payment_notifier import PendingPaymentNotifierWorker

__all__ = ["LedgerReconcilerWorker", "PendingPaymentNotifierWorker"]
