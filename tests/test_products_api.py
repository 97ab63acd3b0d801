def _category(client, title="Kitchen"):
    return client.post("/categories", json={"title": title}).json()


def _product_body(category_id, **overrides):
    body = {
        "title": "Kettle",
        "description": "Boils water",
        "price": "19.99",
        "imageUrl": "https://cdn.example.com/kettle.png",
        "categoryId": category_id,
    }
    body.update(overrides)
    return body


def test_create_and_get_product_embeds_category(client):
    category = _category(client)
    create = client.post("/products", json=_product_body(category["id"]))
    assert create.status_code == 201, create.text
    product = create.json()
    assert create.headers["location"] == f"/products/{product['id']}"
    assert product["price"] == "19.99"
    assert product["category"]["title"] == "Kitchen"

    fetched = client.get(f"/products/{product['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["imageUrl"] == "https://cdn.example.com/kettle.png"

    listed = client.get("/products").json()
    assert listed[0]["category"]["id"] == category["id"]


def test_create_with_missing_category_is_rejected(client):
    resp = client.post("/products", json=_product_body(999))
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_reference"
    assert client.get("/products").json() == []


def test_products_by_category(client):
    kitchen = _category(client)
    garden = _category(client, "Garden")
    client.post("/products", json=_product_body(kitchen["id"]))
    client.post("/products", json=_product_body(garden["id"], title="Rake"))

    resp = client.get(f"/products/category/{garden['id']}")
    assert resp.status_code == 200
    assert [row["title"] for row in resp.json()] == ["Rake"]
    assert client.get("/products/category/999").json() == []


def test_partial_update(client):
    kitchen = _category(client)
    garden = _category(client, "Garden")
    product = client.post("/products", json=_product_body(kitchen["id"])).json()

    resp = client.put(f"/products/{product['id']}", json={"price": "24.50", "categoryId": garden["id"]})
    assert resp.status_code == 204

    updated = client.get(f"/products/{product['id']}").json()
    assert updated["price"] == "24.50"
    assert updated["categoryId"] == garden["id"]
    assert updated["title"] == "Kettle"
    assert updated["description"] == "Boils water"


def test_update_to_missing_category_changes_nothing(client):
    kitchen = _category(client)
    product = client.post("/products", json=_product_body(kitchen["id"])).json()

    resp = client.put(f"/products/{product['id']}", json={"title": "Renamed", "categoryId": 999})
    assert resp.status_code == 400

    unchanged = client.get(f"/products/{product['id']}").json()
    assert unchanged["title"] == "Kettle"
    assert unchanged["categoryId"] == kitchen["id"]


def test_missing_product_returns_404(client):
    assert client.get("/products/5").status_code == 404
    assert client.put("/products/5", json={"title": "x"}).status_code == 404
    assert client.delete("/products/5").status_code == 404


def test_delete_product(client):
    kitchen = _category(client)
    product = client.post("/products", json=_product_body(kitchen["id"])).json()
    assert client.delete(f"/products/{product['id']}").status_code == 204
    assert client.get(f"/products/{product['id']}").status_code == 404
    assert client.get(f"/categories/{kitchen['id']}").status_code == 200


def test_invalid_body_is_a_validation_error(client):
    kitchen = _category(client)
    resp = client.post("/products", json=_product_body(kitchen["id"], price="not-a-price"))
    assert resp.status_code == 400
    assert resp.json()["code"] == "validation_error"
    assert client.get("/products").json() == []
