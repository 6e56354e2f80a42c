from datetime import date

import pytest

from app import cache, db
from app.models.invoice import Invoice


def _invoices(app) -> list[Invoice]:
    with app.app_context():
        return list(db.session.execute(db.select(Invoice).order_by(Invoice.amount)).scalars())


@pytest.mark.unit
def test_invoice_pages_require_login(client) -> None:
    response = client.get("/dashboard/invoices")

    assert response.status_code == 302
    assert "/login" in response.headers["Location"]


@pytest.mark.unit
def test_root_redirects_to_invoice_listing(client) -> None:
    response = client.get("/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/dashboard/invoices")


@pytest.mark.unit
def test_create_invoice_persists_and_redirects(app, auth_client, fixed_today: date) -> None:
    response = auth_client.post(
        "/dashboard/invoices/create",
        data={"customerId": "cust-1", "amount": "42.50", "status": "pending"},
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/dashboard/invoices")
    invoices = _invoices(app)
    assert len(invoices) == 1
    assert invoices[0].customer_id == "cust-1"
    assert invoices[0].amount == 4250
    assert invoices[0].status == "pending"
    assert invoices[0].date == fixed_today


@pytest.mark.unit
def test_create_invoice_rerenders_with_field_errors(app, auth_client) -> None:
    response = auth_client.post(
        "/dashboard/invoices/create",
        data={"customerId": "", "amount": "0", "status": ""},
    )

    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "Missing Fields. Failed to Create Invoice." in body
    assert "Customer name is required" in body
    assert "Amount must be greater than 0" in body
    assert "Invoice Status is required" in body
    assert _invoices(app) == []


@pytest.mark.unit
def test_create_invoice_keeps_submitted_values_on_rejection(app, auth_client) -> None:
    response = auth_client.post(
        "/dashboard/invoices/create",
        data={"customerId": "cust-1", "amount": "-1", "status": "paid"},
    )

    assert response.status_code == 200
    assert "Amount must be greater than 0" in response.get_data(as_text=True)
    assert 'value="-1"' in response.get_data(as_text=True)
    assert _invoices(app) == []


@pytest.mark.unit
def test_listing_is_invalidated_after_create(app, auth_client) -> None:
    first = auth_client.get("/dashboard/invoices")
    assert "No invoices found." in first.get_data(as_text=True)

    auth_client.post(
        "/dashboard/invoices/create",
        data={"customerId": "cust-2", "amount": "15.00", "status": "paid"},
    )
    second = auth_client.get("/dashboard/invoices")

    body = second.get_data(as_text=True)
    assert "Delba de Oliveira" in body
    assert "$15.00" in body


@pytest.mark.unit
def test_listing_search_and_pagination(app, auth_client) -> None:
    with app.app_context():
        for index in range(8):
            db.session.add(
                Invoice(
                    customer_id="cust-1" if index % 2 else "cust-2",
                    amount=(index + 1) * 100,
                    status="paid",
                    date=date(2024, 1, index + 1),
                ),
            )
        db.session.commit()
        cache.clear()

    page_one = auth_client.get("/dashboard/invoices").get_data(as_text=True)
    page_two = auth_client.get("/dashboard/invoices?page=2").get_data(as_text=True)
    searched = auth_client.get("/dashboard/invoices?query=evil").get_data(as_text=True)

    assert page_one.count("/edit") == 6
    assert page_two.count("/edit") == 2
    assert "Evil Rabbit" in searched
    assert "Delba de Oliveira" not in searched


@pytest.mark.unit
def test_edit_missing_invoice_returns_404(auth_client) -> None:
    response = auth_client.get("/dashboard/invoices/does-not-exist/edit")

    assert response.status_code == 404


@pytest.mark.unit
def test_edit_invoice_overwrites_fields(app, auth_client) -> None:
    with app.app_context():
        invoice = Invoice(id="inv-1", customer_id="cust-1", amount=500, status="pending", date=date(2024, 1, 1))
        db.session.add(invoice)
        db.session.commit()

    form = auth_client.get("/dashboard/invoices/inv-1/edit")
    assert 'value="5.00"' in form.get_data(as_text=True)

    response = auth_client.post(
        "/dashboard/invoices/inv-1/edit",
        data={"customerId": "cust-2", "amount": "19.99", "status": "paid"},
    )

    assert response.status_code == 302
    invoices = _invoices(app)
    assert invoices[0].customer_id == "cust-2"
    assert invoices[0].amount == 1999
    assert invoices[0].status == "paid"
    assert invoices[0].date == date(2024, 1, 1)


@pytest.mark.unit
def test_delete_invoice_is_idempotent(app, auth_client) -> None:
    with app.app_context():
        db.session.add(Invoice(id="inv-1", customer_id="cust-1", amount=500, status="pending", date=date(2024, 1, 1)))
        db.session.commit()

    first = auth_client.post("/dashboard/invoices/inv-1/delete")
    second = auth_client.post("/dashboard/invoices/inv-1/delete")

    assert first.status_code == 302
    assert second.status_code == 302
    assert second.headers["Location"].endswith("/dashboard/invoices")
    assert _invoices(app) == []


@pytest.mark.unit
@pytest.mark.parametrize(
    ("amount", "message"),
    [("1e20", "Amount is too large"), ("0.001", "Amount must be greater than 0")],
)
def test_create_invoice_with_unstorable_amount_rerenders_form(app, auth_client, amount: str, message: str) -> None:
    response = auth_client.post(
        "/dashboard/invoices/create",
        data={"customerId": "cust-1", "amount": amount, "status": "paid"},
    )

    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert message in body
    assert "Database Error" not in body
    assert _invoices(app) == []
