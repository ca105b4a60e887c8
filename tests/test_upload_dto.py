"""
Unit tests for upload DTOs.
"""
import pytest
from pydantic import ValidationError
from src.models.dto.upload_dto import TransactionDTO, UploadRequest, UploadWorkflowResponse


class TestUploadDTO:
    """Test suite for upload DTOs."""

    def test_transaction_from_camel_case(self, transaction_payloads):
        transaction = TransactionDTO.model_validate(transaction_payloads[0])

        assert transaction.id == "tx-1"
        assert transaction.type == 1
        assert transaction.product_description == "CURSO DE BEM-ESTAR"
        assert transaction.transaction_owner_name == "JOSE CARLOS"

    def test_transaction_dumps_camel_case(self, transaction_payloads):
        transaction = TransactionDTO.model_validate(transaction_payloads[1])
        assert transaction.model_dump(by_alias=True) == transaction_payloads[1]

    def test_transaction_numeric_id_becomes_string(self, transaction_payloads):
        payload = dict(transaction_payloads[0], id=42)
        assert TransactionDTO.model_validate(payload).id == "42"

    def test_transaction_missing_fields_pass_through(self):
        transaction = TransactionDTO.model_validate({"type": 1, "value": 100})

        assert transaction.id is None
        assert transaction.date is None
        assert transaction.value == 100

    def test_transaction_keeps_integer_value(self, transaction_payloads):
        payload = dict(transaction_payloads[0], value=100)

        dumped = TransactionDTO.model_validate(payload).model_dump(by_alias=True)

        assert dumped["value"] == 100
        assert isinstance(dumped["value"], int)

    def test_transaction_keeps_unknown_fields(self, transaction_payloads):
        payload = dict(transaction_payloads[0], storeName="BAR DO JOAO")

        dumped = TransactionDTO.model_validate(payload).model_dump(by_alias=True)

        assert dumped["storeName"] == "BAR DO JOAO"

    def test_transaction_not_an_object(self):
        with pytest.raises(ValidationError):
            TransactionDTO.model_validate("tx-1")

    def test_upload_request_wire_names(self):
        request = UploadRequest(file="QUJD", file_name="CNAB.txt")
        assert request.model_dump(by_alias=True) == {"file": "QUJD", "fileName": "CNAB.txt"}

    def test_workflow_response_defaults(self):
        response = UploadWorkflowResponse(state="idle")
        assert response.model_dump(by_alias=True) == {
            "state": "idle",
            "fileName": None,
            "errors": [],
            "transactions": []
        }
