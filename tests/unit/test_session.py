"""Testes para a Session padrão (dados, mudança, regeneração, capacidades)."""

from __future__ import annotations

from lazysession.application.session import Session
from lazysession.domain.protocols.session import SessionCookiePersistenceProtocol


class TestSessionData:
    """Leitura e escrita chave-valor."""

    def test_get_returns_default_for_missing_key(self) -> None:
        session = Session()
        assert session.get("missing") is None
        assert session.get("missing", "fallback") == "fallback"

    def test_set_then_get_and_has(self) -> None:
        session = Session()
        session.set("user", "alice")

        assert session.has("user") is True
        assert session.get("user") == "alice"

    def test_unset_missing_key_is_noop(self) -> None:
        session = Session({"a": 1})
        session.unset("b")

        assert session.to_dict() == {"a": 1}

    def test_clear_removes_all_keys(self) -> None:
        session = Session({"a": 1, "b": 2})
        session.clear()

        assert session.to_dict() == {}

    def test_to_dict_is_a_snapshot(self) -> None:
        session = Session({"a": 1})
        snapshot = session.to_dict()
        snapshot["b"] = 2

        assert session.has("b") is False

    def test_input_mapping_is_copied(self) -> None:
        source = {"items": [1, 2]}
        session = Session(source)
        session.get("items").append(3)

        assert source == {"items": [1, 2]}


class TestSessionChanges:
    """Detecção de mudança contra os dados originais."""

    def test_new_session_has_not_changed(self) -> None:
        assert Session({"a": 1}).has_changed() is False

    def test_set_marks_changed(self) -> None:
        session = Session({"a": 1})
        session.set("a", 2)

        assert session.has_changed() is True

    def test_restoring_original_value_is_not_a_change(self) -> None:
        session = Session({"a": 1})
        session.set("a", 2)
        session.set("a", 1)

        assert session.has_changed() is False

    def test_in_place_mutation_is_detected(self) -> None:
        session = Session({"items": [1]})
        session.get("items").append(2)

        assert session.has_changed() is True


class TestSessionRegenerate:
    """regenerate() retorna cópia marcada; a original não muda."""

    def test_regenerate_returns_new_flagged_instance(self) -> None:
        session = Session({"a": 1}, session_id="abc")
        regenerated = session.regenerate()

        assert regenerated is not session
        assert regenerated.is_regenerated() is True
        assert regenerated.has_changed() is True
        assert session.is_regenerated() is False

    def test_regenerate_carries_data_and_id(self) -> None:
        session = Session({"a": 1}, session_id="abc")
        regenerated = session.regenerate()

        assert regenerated.to_dict() == {"a": 1}
        assert regenerated.get_id() == "abc"

    def test_regenerated_data_is_independent(self) -> None:
        session = Session({"a": 1})
        regenerated = session.regenerate()
        regenerated.set("b", 2)

        assert session.has("b") is False


class TestSessionCapabilities:
    """Identificador e lifetime de cookie."""

    def test_get_id_defaults_to_empty_string(self) -> None:
        assert Session().get_id() == ""

    def test_get_id_returns_given_id(self) -> None:
        assert Session(session_id="abcd1234").get_id() == "abcd1234"

    def test_lifetime_defaults_to_zero(self) -> None:
        assert Session().get_session_lifetime() == 0

    def test_persist_session_for_records_lifetime(self) -> None:
        session = Session()
        session.persist_session_for(60)

        assert session.get_session_lifetime() == 60
        assert session.get(SessionCookiePersistenceProtocol.SESSION_LIFETIME_KEY) == 60
        assert session.has_changed() is True
