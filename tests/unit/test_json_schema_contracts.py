"""
Tests for JSON Schema Record Contracts

Комплексное тестирование JSON Schema валидаторов снимков записей:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями (model_dump проходит схему)
- parse_state: схема по kind → доменная модель
"""

import json
from pathlib import Path
from uuid import uuid4

import pytest
from jsonschema import Draft202012Validator, ValidationError

import src.core.contracts as contracts_module
from src.core.contracts import (
    DEFAULT_SCHEMA_DIR,
    SCHEMA_BY_KIND,
    CashStateValidator,
    SchemaLoader,
    SurveyKeyStateValidator,
    SurveyRequestStateValidator,
    SurveyStateValidator,
    parse_state,
    validate_cash_state,
    validate_survey_key_state,
    validate_survey_request_state,
    validate_survey_state,
)
from src.core.domain import CashState, Party, SurveyKeyState, SurveyRequestState, SurveyState


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_survey_state():
    """Валидный survey_state."""
    return {
        "kind": "survey",
        "issuer": {"name": "O=Surveyor,L=New York,C=US", "owning_key": "key-p1"},
        "owner": {"name": "O=Surveyor,L=New York,C=US", "owning_key": "key-p1"},
        "property_address": "12 Main St, Springfield",
        "land_title_id": "LT-0042",
        "survey_date": "2024-01-15",
        "initial_price": 1000,
        "resale_price": 1500,
        "linear_id": {"id": str(uuid4()), "external_id": None},
    }


@pytest.fixture
def valid_cash_state():
    """Валидный cash_state."""
    return {
        "kind": "cash",
        "owner": {"name": "O=Buyer,L=London,C=GB", "owning_key": "key-p2"},
        "quantity": 2000,
        "currency": "USD",
    }


P1 = Party(name="O=Surveyor,L=New York,C=US", owning_key="key-p1")
P2 = Party(name="O=Buyer,L=London,C=GB", owning_key="key-p2")


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    @pytest.mark.parametrize("schema_name", sorted(SCHEMA_BY_KIND.values()))
    def test_schema_is_valid_json_schema(self, schema_name):
        """Каждая схема проходит meta-validation Draft 2020-12"""
        schema = SchemaLoader().load_schema(schema_name)

        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("survey_state") is loader.load_schema("survey_state")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")

    def test_default_schema_dir_inside_package(self):
        """Схемы лежат внутри пакета src.core.contracts (package data), а не в корне репозитория"""
        package_dir = Path(contracts_module.__file__).parent

        assert SchemaLoader().schema_dir == DEFAULT_SCHEMA_DIR == package_dir / "schema"
        for schema_name in SCHEMA_BY_KIND.values():
            assert (DEFAULT_SCHEMA_DIR / f"{schema_name}.json").is_file()

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(schema_dir=tmp_path / "nope")


# =============================================================================
# SURVEY STATE
# =============================================================================


class TestSurveyStateContract:
    """Тесты контракта survey_state"""

    def test_valid(self, valid_survey_state):
        validate_survey_state(valid_survey_state)
        assert SurveyStateValidator().is_valid(valid_survey_state)

    def test_missing_required_field(self, valid_survey_state):
        del valid_survey_state["land_title_id"]

        with pytest.raises(ValidationError, match="land_title_id"):
            validate_survey_state(valid_survey_state)

    def test_price_must_be_integer(self, valid_survey_state):
        valid_survey_state["initial_price"] = 10.5

        assert not SurveyStateValidator().is_valid(valid_survey_state)

    def test_negative_price_is_structurally_valid(self, valid_survey_state):
        """Цены проверяет верификатор, а не схема"""
        valid_survey_state["initial_price"] = -1

        assert SurveyStateValidator().is_valid(valid_survey_state)

    def test_bad_linear_id(self, valid_survey_state):
        valid_survey_state["linear_id"]["id"] = "not-a-uuid"

        assert not SurveyStateValidator().is_valid(valid_survey_state)

    def test_wrong_kind(self, valid_survey_state):
        valid_survey_state["kind"] = "cash"

        assert not SurveyStateValidator().is_valid(valid_survey_state)

    def test_iter_errors_reports_all(self, valid_survey_state):
        del valid_survey_state["owner"]
        valid_survey_state["resale_price"] = "1500"

        errors = list(SurveyStateValidator().iter_errors(valid_survey_state))

        assert len(errors) == 2

    def test_pydantic_dump_matches_schema(self):
        """SurveyState.model_dump(mode='json') проходит схему"""
        survey = SurveyState(
            issuer=P1,
            owner=P1,
            property_address="12 Main St",
            land_title_id="LT-0042",
            survey_date="2024-01-15",
            initial_price=1000,
            resale_price=1500,
        )

        validate_survey_state(survey.model_dump(mode="json"))


# =============================================================================
# OTHER RECORDS
# =============================================================================


class TestOtherRecordContracts:
    """Тесты контрактов survey_key_state, survey_request_state, cash_state"""

    def test_cash_valid(self, valid_cash_state):
        validate_cash_state(valid_cash_state)

    def test_cash_negative_quantity(self, valid_cash_state):
        valid_cash_state["quantity"] = -1

        assert not CashStateValidator().is_valid(valid_cash_state)

    def test_cash_bad_currency(self, valid_cash_state):
        valid_cash_state["currency"] = "dollars"

        assert not CashStateValidator().is_valid(valid_cash_state)

    def test_pydantic_dumps_match_schemas(self):
        request = SurveyRequestState(
            requester=P2,
            surveyor=P1,
            property_address="12 Main St",
            land_title_id="LT-0042",
            survey_price=300,
        )
        key = SurveyKeyState(encoded_survey_hash="hash", encoded_survey_key="key")
        cash = CashState(owner=P2, quantity=2000)

        validate_survey_request_state(request.model_dump(mode="json"))
        validate_survey_key_state(key.model_dump(mode="json"))
        validate_cash_state(cash.model_dump(mode="json"))

    def test_request_rejects_extra_fields(self):
        data = SurveyRequestState(
            requester=P2,
            surveyor=P1,
            property_address="12 Main St",
            land_title_id="LT-0042",
            survey_price=300,
        ).model_dump(mode="json")
        data["unexpected"] = True

        assert not SurveyRequestStateValidator().is_valid(data)

    def test_key_missing_hash(self):
        data = {"kind": "survey_key", "encoded_survey_key": "key", "linear_id": {"id": str(uuid4())}}

        assert not SurveyKeyStateValidator().is_valid(data)


# =============================================================================
# PARSE STATE
# =============================================================================


class TestParseState:
    """Тесты parse_state"""

    def test_parse_survey(self, valid_survey_state):
        state = parse_state(valid_survey_state)

        assert isinstance(state, SurveyState)
        assert state.owner == P1
        assert str(state.linear_id.id) == valid_survey_state["linear_id"]["id"]

    def test_parse_cash(self, valid_cash_state):
        state = parse_state(valid_cash_state)

        assert isinstance(state, CashState)
        assert state.quantity == 2000

    def test_parse_round_trip(self):
        cash = CashState(owner=P2, quantity=2000)

        assert parse_state(cash.model_dump(mode="json")) == cash

    def test_parse_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown record kind"):
            parse_state({"kind": "bond"})

    def test_parse_schema_violation(self, valid_cash_state):
        del valid_cash_state["owner"]

        with pytest.raises(ValidationError):
            parse_state(valid_cash_state)
