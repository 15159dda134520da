import seed
from app import models


def test_seed_loads_demo_matches_once(session_factory, monkeypatch):
    monkeypatch.setattr(seed, "SessionLocal", session_factory)
    monkeypatch.setattr(seed, "init_db", lambda: None)

    assert seed.seed() == len(seed.DEMO_MATCHES)
    assert seed.seed() == 0

    with session_factory() as db:
        assert db.query(models.Match).count() == len(seed.DEMO_MATCHES)
        assert db.query(models.Goal).count() == sum(len(m["goles"]) for m in seed.DEMO_MATCHES)
        assert db.query(models.Card).count() == sum(len(m["tarjetas"]) for m in seed.DEMO_MATCHES)
