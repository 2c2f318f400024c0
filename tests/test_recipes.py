from conftest import assert_bad_request, assert_not_found

OPOR = {
    "nama": "Opor Ayam",
    "bahan": ["1 ekor ayam", "2 Cabe Merah", "1 Lengkuas (dihaluskan)"],
    "langkah": ["Haluskan bumbu", "Tumis bumbu", "Masukkan ayam dan santan"],
}

def test_recipe_lifecycle(client):
    response = client.post("/recipes", json=OPOR)
    assert response.status_code == 200
    recipe_id = response.json()["id"]

    assert client.get(f"/recipes/{recipe_id}").json() == {"id": recipe_id, **OPOR}

    steps = ["Rebus ayam", "Masukkan bumbu"]
    assert client.put(f"/recipes/{recipe_id}", json={"langkah": steps}).status_code == 204

    recipe = client.get(f"/recipes/{recipe_id}").json()
    assert recipe["langkah"] == steps
    assert recipe["bahan"] == OPOR["bahan"]

    assert client.delete(f"/recipes/{recipe_id}").status_code == 204
    assert_not_found(client.get(f"/recipes/{recipe_id}"))

def test_recipe_requires_ingredient_list(client):
    assert_bad_request(client.post("/recipes", json={**OPOR, "bahan": "ayam"}))

def test_empty_update_on_existing_recipe(client):
    recipe_id = client.post("/recipes", json=OPOR).json()["id"]

    assert client.put(f"/recipes/{recipe_id}", json={}).status_code == 204
    assert client.get(f"/recipes/{recipe_id}").json() == {"id": recipe_id, **OPOR}

def test_list_recipes(client):
    assert client.get("/recipes").json() == []
    client.post("/recipes", json=OPOR)
    client.post("/recipes", json={**OPOR, "nama": "Sayur Sop"})

    assert sorted(r["nama"] for r in client.get("/recipes").json()) == ["Opor Ayam", "Sayur Sop"]
