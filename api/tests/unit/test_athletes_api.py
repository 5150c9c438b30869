"""
Testes do contrato HTTP do cadastro de atletas.

A aplicação roda sobre um SQLite temporário (fixture client); erros
sempre voltam no envelope {"success": false, "error": ...}.
"""
import pytest
from httpx import ASGITransport, AsyncClient

from registro.api.dependencies.use_case_deps import get_athlete_use_cases


@pytest.mark.asyncio
async def test_register_then_list(client, athlete_payload):
    response = await client.post("/api/register", json=athlete_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["id"] == 1

    listed = (await client.get("/api/athletes")).json()
    assert len(listed) == 1
    row = listed[0]
    assert row["id"] == body["id"]
    assert row["created_at"]
    for field, value in athlete_payload.items():
        assert row[field] == value, field
    assert row["termo_aceite"] is True


@pytest.mark.asyncio
async def test_register_list_duplicate_delete_scenario(client, athlete_payload):
    created = await client.post("/api/register", json=athlete_payload)
    assert created.json() == {"success": True, "id": 1}

    listed = (await client.get("/api/athletes")).json()
    assert [row["id"] for row in listed] == [1]

    duplicate = await client.post("/api/register", json=athlete_payload)
    assert duplicate.json()["success"] is False
    assert len((await client.get("/api/athletes")).json()) == 1

    deleted = await client.delete("/api/athletes/1")
    assert deleted.json() == {"success": True}
    assert (await client.get("/api/athletes")).json() == []


@pytest.mark.asyncio
async def test_text_fields_are_normalized(client, athlete_payload):
    athlete_payload["nome_completo"] = "  Ana Silva  "
    athlete_payload["uf"] = "ap"
    await client.post("/api/register", json=athlete_payload)

    row = (await client.get("/api/athletes")).json()[0]

    assert row["nome_completo"] == "Ana Silva"
    assert row["uf"] == "AP"

@pytest.mark.asyncio
async def test_register_with_only_required_fields(client):
    response = await client.post("/api/register", json={"nome_completo": "Ana Silva", "cpf": "111"})

    assert response.status_code == 200
    row = (await client.get("/api/athletes")).json()[0]
    assert row["termo_aceite"] is False
    assert row["peso"] is None


@pytest.mark.asyncio
async def test_duplicate_cpf_returns_error_envelope(client, athlete_payload):
    await client.post("/api/register", json=athlete_payload)
    athlete_payload["nome_completo"] = "Outra Pessoa"

    response = await client.post("/api/register", json=athlete_payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "UNIQUE" in body["error"]
    assert len((await client.get("/api/athletes")).json()) == 1


@pytest.mark.asyncio
async def test_missing_cpf_returns_error_envelope(client, athlete_payload):
    athlete_payload.pop("cpf")

    response = await client.post("/api/register", json=athlete_payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "cpf" in body["error"]
    assert (await client.get("/api/athletes")).json() == []


@pytest.mark.asyncio
async def test_list_empty(client):
    response = await client.get("/api/athletes")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_newest_first(client, athlete_payload):
    ids = []
    for nome, cpf in [("Ana Silva", "1"), ("Bruno Costa", "2"), ("Carla Souza", "3")]:
        payload = dict(athlete_payload, nome_completo=nome, cpf=cpf)
        ids.append((await client.post("/api/register", json=payload)).json()["id"])

    listed = (await client.get("/api/athletes")).json()

    assert [row["id"] for row in listed] == list(reversed(ids))


@pytest.mark.asyncio
async def test_search(client, athlete_payload):
    await client.post("/api/register", json=athlete_payload)
    await client.post("/api/register", json=dict(athlete_payload, nome_completo="Bruno Costa", cpf="999"))

    listed = (await client.get("/api/athletes", params={"search": "bruno"})).json()

    assert [row["cpf"] for row in listed] == ["999"]


@pytest.mark.asyncio
async def test_search_accented_name(client, athlete_payload):
    await client.post("/api/register", json=dict(athlete_payload, nome_completo="Érica Ângela"))

    listed = (await client.get("/api/athletes", params={"search": "érica"})).json()

    assert [row["nome_completo"] for row in listed] == ["Érica Ângela"]


@pytest.mark.asyncio
async def test_delete_is_idempotent(client, athlete_payload):
    athlete_id = (await client.post("/api/register", json=athlete_payload)).json()["id"]

    first = await client.delete(f"/api/athletes/{athlete_id}")
    second = await client.delete(f"/api/athletes/{athlete_id}")
    missing = await client.delete("/api/athletes/999")

    for response in (first, second, missing):
        assert response.status_code == 200
        assert response.json() == {"success": True}
    assert (await client.get("/api/athletes")).json() == []


@pytest.mark.asyncio
async def test_delete_then_register_same_cpf(client, athlete_payload):
    first_id = (await client.post("/api/register", json=athlete_payload)).json()["id"]
    await client.delete(f"/api/athletes/{first_id}")

    response = await client.post("/api/register", json=athlete_payload)

    assert response.status_code == 200
    assert response.json()["id"] > first_id


@pytest.mark.asyncio
async def test_delete_non_numeric_id_is_a_no_op(client, athlete_payload):
    await client.post("/api/register", json=athlete_payload)

    for raw_id in ("abc", "1.0", "99999999999999999999"):
        response = await client.delete(f"/api/athletes/{raw_id}")
        assert response.status_code == 200
        assert response.json() == {"success": True}

    assert len((await client.get("/api/athletes")).json()) == 1


@pytest.mark.asyncio
async def test_export_pdf(client, athlete_payload):
    athlete_id = (await client.post("/api/register", json=athlete_payload)).json()["id"]

    response = await client.get(f"/api/athletes/{athlete_id}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="ficha_Ana_Silva.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_export_pdf_accented_name(client, athlete_payload):
    athlete_payload["nome_completo"] = "João Conceição"
    athlete_id = (await client.post("/api/register", json=athlete_payload)).json()["id"]

    response = await client.get(f"/api/athletes/{athlete_id}/pdf")

    disposition = response.headers["content-disposition"]
    assert 'filename="ficha_Joao_Conceicao.pdf"' in disposition
    assert "filename*=UTF-8''ficha_Jo%C3%A3o_Concei%C3%A7%C3%A3o.pdf" in disposition


@pytest.mark.asyncio
async def test_export_pdf_unknown_athlete(client):
    response = await client.get("/api/athletes/12345/pdf")

    assert response.status_code == 404
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_unexpected_error_returns_envelope(app):
    def _broken_use_cases():
        raise RuntimeError("database is locked")

    app.dependency_overrides[get_athlete_use_cases] = _broken_use_cases
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/athletes")
    app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "database is locked"}


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_static_build_is_served(session_factory, tmp_path):
    from main import create_application
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text("<h1>Cadastro</h1>", encoding="utf-8")
    app = create_application(session_factory=session_factory, static_dir=str(dist))

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        page = await client.get("/")
        api = await client.get("/api/athletes")

    assert page.status_code == 200
    assert "Cadastro" in page.text
    assert api.json() == []
