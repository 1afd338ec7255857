def test_health(test_client):
    r = test_client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["database"] == "ok"
    assert "version" in data

def test_version(test_client):
    r = test_client.get("/version")
    assert r.status_code == 200
    data = r.json()
    assert data["name"] == "Flashcards (tests)"
    assert data["env"] == "test"
    assert "version" in data

def test_stylesheet_is_served(test_client):
    r = test_client.get("/assets/style.css")
    assert r.status_code == 200
    assert "text/css" in r.headers["content-type"]

def test_unknown_asset_is_404(test_client):
    r = test_client.get("/assets/nope.css")
    assert r.status_code == 404

def test_script_is_served(test_client):
    r = test_client.get("/assets/app.js")
    assert r.status_code == 200
    assert "javascript" in r.headers["content-type"]
    # réponse "updated rows: 0" : la réponse affichée n'est pas modifiée
    assert "if (!count) return;" in r.text
