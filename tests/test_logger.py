import logging

from petcare.config import Settings
from petcare.logger import SUCCESS, PetLogger, format_meta


def test_format_meta():
    assert format_meta(None) == ""
    assert format_meta("plain") == "\n    -> plain"
    assert format_meta({"id": "1"}) == '\n    -> {\n    ->   "id": "1"\n    -> }'

def test_levels(caplog):
    log = PetLogger("petcare.test_levels")
    with caplog.at_level(logging.DEBUG, logger="petcare.test_levels"):
        log.info("listing", {"count": 2})
        log.warn("bad id")
        log.error("boom")
        log.success("created")
        log.debug("details")
    assert [r.levelno for r in caplog.records] == [
        logging.INFO, logging.WARNING, logging.ERROR, SUCCESS, logging.DEBUG,
    ]
    assert caplog.records[0].getMessage().startswith("listing\n    -> ")
    assert caplog.records[3].levelname == "SUCCESS"

def test_debug_disabled(caplog):
    log = PetLogger("petcare.test_debug", debug_enabled=False)
    with caplog.at_level(logging.DEBUG, logger="petcare.test_debug"):
        log.debug("hidden")
    assert caplog.records == []

def test_banner(caplog):
    with caplog.at_level(logging.INFO, logger="petcare.test_banner"):
        PetLogger("petcare.test_banner").banner("PetCare")
    assert caplog.records[0].getMessage() == "=" * 15 + "\n==  PetCare  ==\n" + "=" * 15

def test_mongo_client_options():
    settings = Settings(
        mongodb_user="u",
        mongodb_pass="p",
        mongodb_auth_source="admin",
        mongodb_tls=True,
        server_selection_timeout_ms=1000,
    )
    options = settings.mongo_client_options()
    assert options["username"] == "u" and options["password"] == "p"
    assert options["authSource"] == "admin"
    assert options["tls"] is True
    assert options["serverSelectionTimeoutMS"] == 1000
    assert "replicaSet" not in options
