from fastapi.testclient import TestClient


def _sale(client: TestClient, **overrides):
    payload = {
        "customerName": "Maria",
        "description": "Almoço executivo",
        "amount": "100.00",
        "paymentStatus": "fiado",
    }
    payload.update(overrides)
    return client.post("/api/sales", json=payload)


def test_health(client: TestClient):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_sale_returns_money_as_text(client: TestClient):
    response = _sale(client, amount="100")

    assert response.status_code == 201
    body = response.json()
    assert body["amount"] == "100.00"
    assert body["paidAmount"] == "0.00"
    assert body["paymentStatus"] == "fiado"
    assert body["customerName"] == "Maria"
    assert body["customerId"]


def test_sale_creates_customer_with_debt(client: TestClient):
    sale = _sale(client).json()

    customers = client.get("/api/customers").json()

    assert len(customers) == 1
    assert customers[0]["id"] == sale["customerId"]
    assert customers[0]["totalDebt"] == "100.00"
    assert customers[0]["phone"] is None


def test_payment_amendment_flow(client: TestClient):
    sale = _sale(client).json()

    response = client.patch(
        f"/api/sales/{sale['id']}/payment",
        json={"status": "parcial", "paidAmount": "40.00"},
    )
    assert response.status_code == 200
    assert response.json()["paidAmount"] == "40.00"
    assert client.get(f"/api/customers/{sale['customerId']}").json()["totalDebt"] == "60.00"

    client.patch(f"/api/sales/{sale['id']}/payment", json={"status": "pago", "paidAmount": "100.00"})
    assert client.get(f"/api/customers/{sale['customerId']}").json()["totalDebt"] == "0.00"


def test_payment_amendment_of_unknown_sale_is_404(client: TestClient):
    response = client.patch("/api/sales/missing/payment", json={"status": "pago"})

    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["message"] == "Sale not found"


def test_payment_amendment_rejects_overpayment(client: TestClient):
    sale = _sale(client, amount="20.00").json()

    response = client.patch(
        f"/api/sales/{sale['id']}/payment",
        json={"status": "pago", "paidAmount": "25.00"},
    )

    assert response.status_code == 400


def test_invalid_sale_payloads_are_400(client: TestClient):
    assert _sale(client, amount="abc").status_code == 400
    assert _sale(client, amount="10.123").status_code == 400
    assert _sale(client, amount="0").status_code == 400
    assert _sale(client, paymentStatus="talvez").status_code == 400
    assert _sale(client, customerName="   ").status_code == 400
    assert _sale(client, paymentStatus="parcial", paidAmount="150.00").status_code == 400

    response = client.post("/api/sales", json={"description": "sem cliente"})
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert isinstance(response.json()["error"], list)
    assert client.get("/api/sales").json() == []


def test_blank_paid_amount_is_accepted(client: TestClient):
    response = _sale(client, paymentStatus="fiado", paidAmount="")

    assert response.status_code == 201
    assert response.json()["paidAmount"] == "0.00"


def test_get_unknown_entities_is_404(client: TestClient):
    for path in ("customers", "suppliers", "sales", "expenses"):
        response = client.get(f"/api/{path}/nope")
        assert response.status_code == 404
        assert response.json()["status_code"] == 404


def test_create_customer(client: TestClient):
    response = client.post("/api/customers", json={"name": "Carlos", "phone": "11 98888-7777"})

    assert response.status_code == 201
    assert response.json()["totalDebt"] == "0.00"
    assert client.post("/api/customers", json={"name": ""}).status_code == 400


def test_customer_sales_listing(client: TestClient):
    first = _sale(client, description="Almoço").json()
    _sale(client, customerName="João")
    second = _sale(client, customerName="MARIA", description="Jantar").json()

    sales = client.get(f"/api/customers/{first['customerId']}/sales").json()

    assert [s["id"] for s in sales] == [second["id"], first["id"]]


def test_customer_list_filters(client: TestClient):
    _sale(client, customerName="Ana", paymentStatus="pago", paidAmount="100.00")
    _sale(client, customerName="Bruno")

    names = [c["name"] for c in client.get("/api/customers", params={"with_debt": True}).json()]
    assert names == ["Bruno"]


def test_suppliers(client: TestClient):
    created = client.post(
        "/api/suppliers",
        json={"name": "Distribuidora Sol", "phone": "11 3333-4444", "category": "Bebidas"},
    )
    assert created.status_code == 201
    supplier = created.json()

    assert client.get(f"/api/suppliers/{supplier['id']}").json()["category"] == "Bebidas"
    assert [s["id"] for s in client.get("/api/suppliers", params={"search": "bebi"}).json()] == [supplier["id"]]
    assert client.post("/api/suppliers", json={"phone": "1"}).status_code == 400


def test_expenses_and_category_filter(client: TestClient):
    rent = client.post(
        "/api/expenses",
        json={"category": "aluguel", "description": "Aluguel", "amount": "1500.00", "paymentStatus": "pago"},
    )
    assert rent.status_code == 201
    assert rent.json()["supplierId"] is None

    client.post(
        "/api/expenses",
        json={
            "category": "fornecedores",
            "description": "Bebidas",
            "amount": "320.40",
            "paymentStatus": "fiado",
            "supplierName": "Distribuidora Sol",
        },
    )

    all_expenses = client.get("/api/expenses").json()
    assert [e["category"] for e in all_expenses] == ["fornecedores", "aluguel"]

    rent_only = client.get("/api/expenses", params={"category": "aluguel"}).json()
    assert [e["id"] for e in rent_only] == [rent.json()["id"]]

    assert client.get("/api/expenses", params={"category": "bogus"}).status_code == 400
    assert client.post("/api/expenses", json={"category": "bogus", "description": "x", "amount": "1"}).status_code == 400


def test_analytics_endpoints(client: TestClient):
    _sale(client, customerName="Ana", amount="50.00", paymentStatus="pago", paidAmount="50.00")
    _sale(client, customerName="Bruno", amount="30.00", paymentStatus="parcial", paidAmount="10.00")
    client.post(
        "/api/expenses",
        json={"category": "ingredientes", "description": "Carne", "amount": "25.00"},
    )

    summary = client.get("/api/analytics/summary").json()
    assert summary == {
        "totalSales": "80.00",
        "totalReceived": "60.00",
        "totalPending": "20.00",
        "totalExpenses": "25.00",
        "netProfit": "35.00",
    }

    by_category = client.get("/api/analytics/expenses-by-category").json()
    assert by_category == [{"category": "ingredientes", "total": "25.00", "percentage": 100.0}]

    debtors = client.get("/api/analytics/top-debtors").json()
    assert [d["name"] for d in debtors] == ["Bruno"]
    assert debtors[0]["totalDebt"] == "20.00"


def test_stores_are_isolated_between_apps(client: TestClient):
    _sale(client)

    from tempero.core.store import MemoryStore
    from tempero.main import create_app

    with TestClient(create_app(MemoryStore())) as other:
        assert other.get("/api/sales").json() == []


def test_response_validation_failure_is_a_server_error(store, monkeypatch):
    from tempero.api import sale as sale_routes
    from tempero.main import create_app

    validate = sale_routes.SaleResponse.model_validate

    def broken(obj):
        # a pydantic ValidationError is also a ValueError
        return validate({})

    monkeypatch.setattr(sale_routes.SaleResponse, "model_validate", broken)

    with TestClient(create_app(store), raise_server_exceptions=False) as client:
        response = _sale(client)

    assert response.status_code == 500
    assert response.json()["message"] == "Internal Server Error"
    # the sale itself was recorded before the response failed
    assert len(store.list("sales")) == 1
