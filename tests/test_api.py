"""
HTTP API tests: calculations, materials, profiles.
"""


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_weight_endpoint_with_material(client):
    response = client.post("/api/calculations/weight", json={
        "type": "plate",
        "dimensions": {"width": 1000, "length": 2000, "thickness": 3},
        "unit": "mm",
        "material": "steel",
    })
    assert response.status_code == 200
    assert abs(response.json()["weight_kg"] - 47.1) < 1e-9


def test_weight_endpoint_with_raw_density_and_camel_case(client):
    response = client.post("/api/calculations/weight", json={
        "type": "pipe",
        "subType": "round",
        "dimensions": {"outerDiameter": 33.7, "thickness": 2.6, "length": 6000},
        "density": 7.85,
    })
    assert response.status_code == 200
    assert 11.8 < response.json()["weight_kg"] < 12.1


def test_weight_endpoint_half_filled_form_is_zero(client):
    response = client.post("/api/calculations/weight", json={
        "type": "bar",
        "subType": "round",
        "dimensions": {"diameter": "", "length": "60"},
        "material": "steel",
    })
    assert response.status_code == 200
    assert response.json()["weight_kg"] == 0.0


def test_weight_endpoint_unknown_material_is_404(client):
    response = client.post("/api/calculations/weight", json={
        "type": "plate",
        "dimensions": {"width": 1, "length": 1, "thickness": 1},
        "material": "cheese",
    })
    assert response.status_code == 404


def test_price_endpoint(client):
    response = client.post("/api/calculations/price", json={
        "weightKg": 5.33, "pricePerKg": 2.0, "quantity": 10,
    })
    assert response.status_code == 200
    assert response.json() == {"unit_price": 10.66, "total": 106.6}


def test_name_endpoint(client):
    response = client.post("/api/calculations/name", json={
        "type": "pipe",
        "subType": "round",
        "dimensions": {"outerDiameter": 33.7, "thickness": 2.6, "length": 6000},
        "language": "bs",
    })
    assert response.status_code == 200
    assert response.json()["name"] == "Okrugla cijev Ø33.7x2.6 L=6000mm"


def test_full_calculation(client):
    response = client.post("/api/calculations/", json={
        "type": "profile",
        "subType": "standard",
        "dimensions": {"size": "HEA 200", "length": 6000},
        "material": "steel",
        "pricePerKg": 1.1,
        "quantity": 2,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["shape"] == "standard_profile"
    assert data["name"] == "Profile HEA 200 L=6000mm"
    assert abs(data["weight_kg"] - 253.8) < 1e-9
    assert data["unit_price"] == 279.18
    assert data["total"] == 558.36
    assert data["warnings"] == []


def test_full_calculation_unknown_shape_is_not_an_error(client):
    response = client.post("/api/calculations/", json={
        "type": "sphere",
        "dimensions": {"diameter": 10},
        "density": 7.85,
        "pricePerKg": 1.0,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["shape"] is None
    assert data["weight_kg"] == 0.0
    assert data["name"] == ""
    assert len(data["warnings"]) == 1


def test_full_calculation_rejects_unknown_pricing_model(client):
    response = client.post("/api/calculations/", json={
        "type": "plate", "density": 7.85, "pricingModel": "per_ton",
    })
    assert response.status_code == 422


def test_list_materials(client):
    response = client.get("/api/materials/?language=bs")
    assert response.status_code == 200
    materials = {m["id"]: m for m in response.json()}
    assert materials["steel"]["density"] == 7.85
    assert materials["steel"]["name"] == "Čelik"
    assert materials["steel"]["names"]["en"] == "Steel"


def test_get_material(client):
    assert client.get("/api/materials/titanium").json()["density"] == 4.5
    assert client.get("/api/materials/cheese").status_code == 404


def test_profiles(client):
    families = client.get("/api/profiles/").json()
    assert [f["id"] for f in families] == ["ipe", "ipn", "upn", "hea", "heb"]
    heb = client.get("/api/profiles/heb").json()
    assert heb["sizes"][0] == "HEB 100"
    assert client.get("/api/profiles/w-beam").status_code == 404


def test_weight_endpoint_oversized_integer_is_zero(client):
    response = client.post(
        "/api/calculations/weight",
        content='{"type": "plate", "material": "steel", "dimensions": '
                '{"width": ' + "9" * 400 + ', "length": 2000, "thickness": 3}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["weight_kg"] == 0.0


def test_price_endpoint_large_amount(client):
    response = client.post("/api/calculations/price", json={
        "weightKg": 1e20, "pricePerKg": 1e7, "quantity": 1,
    })
    assert response.status_code == 200
    assert response.json()["total"] == 1e27
