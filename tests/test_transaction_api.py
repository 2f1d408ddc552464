from datetime import datetime, timezone

from financial.enums import Finality
from tests.factories.entities import make_category, make_transaction, make_user


def _payload(category_id, user_id, **overrides):
    body = {
        "description": "Compra supermercado",
        "value": 100.5,
        "type": "expense",
        "categoryId": category_id,
        "userId": user_id,
    }
    body.update(overrides)
    return body


def test_create_and_read_transaction(client, db_session, frozen_now):
    user = make_user(db_session, name="João", age=25)
    cat = make_category(db_session, description="Alimentação", finality=Finality.EXPENSE)

    r = client.post("/transaction", json=_payload(cat.id, user.id))
    assert r.status_code == 201
    tid = r.json()["data"]["id"]

    r = client.get(f"/transaction/{tid}")
    assert r.status_code == 200
    assert r.json()["data"] == {
        "id": tid,
        "description": "Compra supermercado",
        "value": 100.5,
        "type": "expense",
        "date": "15/09/2025",
        "category": {"id": cat.id, "description": "Alimentação", "finality": "expense"},
        "user": {"id": user.id, "name": "João", "age": 25},
    }


def test_minor_income_is_rejected(client, db_session):
    ana = client.post("/user", json={"name": "Ana", "age": 16}).json()["data"]["id"]
    salary = client.post("/category", json={"description": "Salário", "finality": "income"}).json()["data"]["id"]

    r = client.post(
        "/transaction",
        json=_payload(salary, ana, description="Mesada", value=50, type="income"),
    )
    assert r.status_code == 400
    assert r.json() == {
        "message": "Transaction validation failed",
        "data": ["A user under 18 cannot have income transactions."],
    }
    assert client.get("/transaction", params={"month": 0, "year": 0}).json()["data"] == []


def test_unknown_type_is_malformed(client, db_session):
    user = make_user(db_session)
    cat = make_category(db_session)
    r = client.post("/transaction", json=_payload(cat.id, user.id, type="transfer"))
    assert r.status_code == 400
    assert r.json()["message"] == "Malformed request"


def test_missing_category_then_user(client, db_session):
    r = client.post("/transaction", json=_payload(999, 998))
    assert r.status_code == 404
    assert r.json()["message"] == "Category not found"

    cat = make_category(db_session)
    r = client.post("/transaction", json=_payload(cat.id, 998))
    assert r.status_code == 404
    assert r.json()["message"] == "User not found"


def test_non_numeric_value_is_malformed(client, db_session):
    r = client.post("/transaction", json=_payload(1, 1, value="lots"))
    assert r.status_code == 400
    assert r.json()["message"] == "Malformed request"


def test_list_defaults_to_current_month(client, db_session, frozen_now):
    user = make_user(db_session)
    cat = make_category(db_session)
    make_transaction(db_session, user=user, category=cat, description="Agosto",
                     created_at=datetime(2025, 8, 20, tzinfo=timezone.utc))
    make_transaction(db_session, user=user, category=cat, description="Setembro",
                     created_at=datetime(2025, 9, 2, tzinfo=timezone.utc))

    r = client.get("/transaction")
    assert r.status_code == 200
    assert [t["description"] for t in r.json()["data"]] == ["Setembro"]

    r = client.get("/transaction", params={"month": 8, "year": 2025})
    assert [t["description"] for t in r.json()["data"]] == ["Agosto"]

    r = client.get("/transaction", params={"month": 0, "year": 0})
    assert [t["description"] for t in r.json()["data"]] == ["Agosto", "Setembro"]


def test_update_transaction(client, db_session):
    user = make_user(db_session)
    cat = make_category(db_session, finality=Finality.BOTH)
    t = make_transaction(db_session, user=user, category=cat)

    r = client.put(
        f"/transaction/{t.id}",
        json=_payload(cat.id, user.id, description="Freela", value=800, type="income"),
    )
    assert r.status_code == 204
    assert r.content == b""

    data = client.get(f"/transaction/{t.id}").json()["data"]
    assert data["description"] == "Freela"
    assert data["type"] == "income"
    assert data["value"] == 800.0


def test_update_transaction_incompatible_category(client, db_session):
    user = make_user(db_session)
    cat = make_category(db_session, finality=Finality.EXPENSE)
    t = make_transaction(db_session, user=user, category=cat)

    r = client.put(f"/transaction/{t.id}", json=_payload(cat.id, user.id, type="income"))
    assert r.status_code == 400
    assert r.json()["data"] == ["Transaction type is not compatible with the selected category."]
    assert client.get(f"/transaction/{t.id}").json()["data"]["type"] == "expense"


def test_delete_transaction(client, db_session):
    user = make_user(db_session)
    cat = make_category(db_session)
    tid = make_transaction(db_session, user=user, category=cat).id

    assert client.delete(f"/transaction/{tid}").status_code == 204
    r = client.delete(f"/transaction/{tid}")
    assert r.status_code == 404
    assert r.json() == {"message": "Transaction not found", "data": None}


def test_value_below_one_cent_is_rejected(client, db_session):
    user = make_user(db_session)
    cat = make_category(db_session)
    r = client.post("/transaction", json=_payload(cat.id, user.id, value=0.001))
    assert r.status_code == 400
    assert r.json() == {
        "message": "Transaction validation failed",
        "data": ["Value must be greater than zero."],
    }
    assert client.get("/transaction", params={"month": 0, "year": 0}).json()["data"] == []


def test_one_cent_is_stored_as_positive(client, db_session):
    user = make_user(db_session)
    cat = make_category(db_session)
    r = client.post("/transaction", json=_payload(cat.id, user.id, value=0.01))
    assert r.status_code == 201
    value = client.get(f"/transaction/{r.json()['data']['id']}").json()["data"]["value"]
    assert value == 0.01
