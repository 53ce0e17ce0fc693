"""Ledger use cases: customers, transactions, payments and profile"""
from .add_customer import AddCustomer
from .update_customer import UpdateCustomer
from .delete_customer import DeleteCustomer
from .list_customers import CustomerSort, ListCustomers
from .get_customer import GetCustomer
from .add_transaction import AddTransaction
from .update_transaction import UpdateTransaction
from .get_transaction import GetTransaction
from .list_customer_transactions import ListCustomerTransactions
from .list_customer_payments import ListCustomerPayments
from .record_payment import RecordPayment
from .profile import GetProfile, SaveProfile
from .reconcile_ledger import ReconcileLedger, LedgerIssueType
from .send_pending_reminders import SendPendingReminders
from .scan_business_card import ScanBusinessCard
from .dtos import (
    CreateCustomerCommandDTO,
    CustomerPatchDTO,
    CreateTransactionCommandDTO,
    TransactionPatchDTO,
    RecordPaymentCommandDTO,
    RecordPaymentResponseDTO,
    CustomerDetailDTO,
    TransactionDetailDTO,
    LedgerIssueDTO,
    ReconciliationResultDTO,
    ReminderRunResultDTO,
)

__all__ = [
    "AddCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "ListCustomers",
    "CustomerSort",
    "GetCustomer",
    "AddTransaction",
    "UpdateTransaction",
    "GetTransaction",
    "ListCustomerTransactions",
    "ListCustomerPayments",
    "RecordPayment",
    "GetProfile",
    "SaveProfile",
    "ReconcileLedger",
    "LedgerIssueType",
    "SendPendingReminders",
    "ScanBusinessCard",
    "CreateCustomerCommandDTO",
    "CustomerPatchDTO",
    "CreateTransactionCommandDTO",
    "TransactionPatchDTO",
    "RecordPaymentCommandDTO",
    "RecordPaymentResponseDTO",
    "CustomerDetailDTO",
    "TransactionDetailDTO",
    "LedgerIssueDTO",
    "ReconciliationResultDTO",
    "ReminderRunResultDTO",
]
