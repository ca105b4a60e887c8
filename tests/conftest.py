"""
Shared test fixtures and utilities.
"""
import pytest


@pytest.fixture
def transaction_payloads():
    """Two transaction records as returned by the backend."""
    return [
        {
            "id": "tx-1",
            "type": 1,
            "date": "2022-01-15T19:20:30-03:00",
            "productDescription": "CURSO DE BEM-ESTAR",
            "value": 127.5,
            "transactionOwnerName": "JOSE CARLOS"
        },
        {
            "id": "tx-2",
            "type": 3,
            "date": "2022-01-16T14:13:54-03:00",
            "productDescription": "DESENVOLVEDOR FULL STACK",
            "value": 4500.0,
            "transactionOwnerName": "ELIANA NOGUEIRA"
        }
    ]
