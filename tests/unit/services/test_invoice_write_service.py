from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from app.repositories.invoices_repository import InvoicesRepository
from app.services.cache.view_cache_service import ViewCacheService
from app.schemas.invoices import to_minor_units
from app.services.invoices.invoice_write_service import InvoiceWriteService


class _RecordingInvoicesRepository(InvoicesRepository):
    def __init__(self, *, error: Exception | None = None, rowcount: int = 1) -> None:
        self._error = error
        self._rowcount = rowcount
        self.inserted: list[dict[str, object]] = []
        self.updated: list[tuple[str, dict[str, object]]] = []
        self.deleted: list[str] = []
        self.commits = 0
        self.rollbacks = 0

    def insert(self, **values: object) -> None:  # type: ignore[override]
        if self._error:
            raise self._error
        self.inserted.append(values)

    def update(self, invoice_id: str, **values: object) -> int:  # type: ignore[override]
        if self._error:
            raise self._error
        self.updated.append((invoice_id, values))
        return self._rowcount

    def delete(self, invoice_id: str) -> int:
        if self._error:
            raise self._error
        self.deleted.append(invoice_id)
        return self._rowcount

    def commit(self) -> None:  # type: ignore[override]
        self.commits += 1

    def rollback(self) -> None:  # type: ignore[override]
        self.rollbacks += 1


class _RecordingViewCache(ViewCacheService):
    def __init__(self) -> None:
        super().__init__()
        self.invalidated: list[str] = []

    def invalidate(self, path: str) -> int:
        self.invalidated.append(path)
        return len(self.invalidated)


def _db_error() -> OperationalError:
    return OperationalError("INSERT INTO invoices ...", {}, Exception("connection refused"))


def _build(repository: _RecordingInvoicesRepository) -> tuple[InvoiceWriteService, _RecordingViewCache]:
    view_cache = _RecordingViewCache()
    return InvoiceWriteService(repository=repository, view_cache=view_cache), view_cache


@pytest.mark.unit
@pytest.mark.parametrize(
    ("amount", "expected"),
    [("42.5", 4250), ("0.01", 1), ("19.99", 1999), ("0.005", 1), ("1.004", 100), ("1000000", 100000000)],
)
def test_to_minor_units_rounds_half_up(amount: str, expected: int) -> None:
    assert to_minor_units(Decimal(amount)) == expected


@pytest.mark.unit
def test_create_inserts_minor_units_and_today(fixed_today: date) -> None:
    repository = _RecordingInvoicesRepository()
    service, view_cache = _build(repository)

    result = service.create({"customerId": "c-1", "amount": "42.50", "status": "pending"})

    assert result.is_redirect
    assert result.location == "/dashboard/invoices"
    assert repository.inserted == [
        {"customer_id": "c-1", "amount": 4250, "status": "pending", "invoice_date": fixed_today},
    ]
    assert repository.commits == 1
    assert view_cache.invalidated == ["/dashboard/invoices"]


@pytest.mark.unit
def test_create_rejects_invalid_input_without_persisting() -> None:
    repository = _RecordingInvoicesRepository()
    service, view_cache = _build(repository)

    result = service.create({"customerId": "", "amount": "0", "status": "unknown"})

    assert result.is_rejected
    assert result.message == "Missing Fields. Failed to Create Invoice."
    assert set(result.field_errors) == {"customerId", "amount", "status"}
    assert repository.inserted == []
    assert repository.commits == 0
    assert view_cache.invalidated == []


@pytest.mark.unit
def test_create_returns_generic_message_on_database_error(fixed_today: date) -> None:
    repository = _RecordingInvoicesRepository(error=_db_error())
    service, view_cache = _build(repository)

    result = service.create({"customerId": "c-1", "amount": "10", "status": "paid"})

    assert result.is_failed
    assert result.message == "Database Error: Failed to Create Invoice."
    assert "connection refused" not in (result.message or "")
    assert result.field_errors == {}
    assert repository.rollbacks == 1
    assert view_cache.invalidated == []


@pytest.mark.unit
def test_update_overwrites_without_touching_date() -> None:
    repository = _RecordingInvoicesRepository()
    service, view_cache = _build(repository)

    result = service.update("inv-1", {"customerId": "c-2", "amount": "19.99", "status": "paid"})

    assert result.is_redirect
    assert repository.updated == [("inv-1", {"customer_id": "c-2", "amount": 1999, "status": "paid"})]
    assert view_cache.invalidated == ["/dashboard/invoices"]


@pytest.mark.unit
def test_update_rejection_uses_update_summary() -> None:
    repository = _RecordingInvoicesRepository()
    service, _ = _build(repository)

    result = service.update("inv-1", {"customerId": "c-2", "amount": "abc", "status": "paid"})

    assert result.is_rejected
    assert result.message == "Missing Fields. Failed to Update Invoice."
    assert result.field_errors == {"amount": ["Amount must be a number"]}
    assert repository.updated == []


@pytest.mark.unit
def test_update_of_missing_invoice_still_succeeds() -> None:
    repository = _RecordingInvoicesRepository(rowcount=0)
    service, view_cache = _build(repository)

    result = service.update("missing", {"customerId": "c-2", "amount": "5", "status": "pending"})

    assert result.is_redirect
    assert view_cache.invalidated == ["/dashboard/invoices"]


@pytest.mark.unit
def test_update_returns_generic_message_on_database_error() -> None:
    repository = _RecordingInvoicesRepository(error=_db_error())
    service, _ = _build(repository)

    result = service.update("inv-1", {"customerId": "c-2", "amount": "5", "status": "pending"})

    assert result.is_failed
    assert result.message == "Database Error: Failed to Update Invoice."


@pytest.mark.unit
def test_delete_is_idempotent_and_always_invalidates() -> None:
    repository = _RecordingInvoicesRepository(rowcount=0)
    service, view_cache = _build(repository)

    first = service.delete("inv-1")
    second = service.delete("inv-1")

    assert first.is_redirect
    assert second.is_redirect
    assert repository.deleted == ["inv-1", "inv-1"]
    assert view_cache.invalidated == ["/dashboard/invoices", "/dashboard/invoices"]


@pytest.mark.unit
def test_delete_returns_generic_message_on_database_error() -> None:
    repository = _RecordingInvoicesRepository(error=_db_error())
    service, view_cache = _build(repository)

    result = service.delete("inv-1")

    assert result.is_failed
    assert result.message == "Database Error: Failed to Delete Invoice."
    assert view_cache.invalidated == []


@pytest.mark.unit
@pytest.mark.parametrize("amount", ["1e999999999", "1e20", "0.001"])
def test_create_rejects_amounts_that_cannot_be_stored(amount: str) -> None:
    repository = _RecordingInvoicesRepository()
    service, view_cache = _build(repository)

    result = service.create({"customerId": "c-1", "amount": amount, "status": "paid"})

    assert result.is_rejected
    assert list(result.field_errors) == ["amount"]
    assert repository.inserted == []
    assert repository.rollbacks == 0
    assert view_cache.invalidated == []
