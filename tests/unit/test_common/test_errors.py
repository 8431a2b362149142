"""
Test error definitions
"""

from sqlrepo.common.errors import AppError, NotFoundError, RepositoryError, ValidationError


def test_not_found_to_dict():
    error = NotFoundError(message="SampleEntity with id 3 not found", details={"id": 3})

    assert isinstance(error, AppError)
    assert str(error) == "SampleEntity with id 3 not found"
    assert error.to_dict() == {
        "error": {
            "message": "SampleEntity with id 3 not found",
            "type": "not_found_error",
            "code": "not_found",
            "details": {"id": 3},
        }
    }


def test_details_omitted_when_empty():
    error = ValidationError()

    assert error.to_dict() == {
        "error": {
            "message": "Validation failed",
            "type": "validation_error",
            "code": "validation_error",
        }
    }


def test_repository_error_defaults():
    error = RepositoryError(code="unsupported_backfill")

    assert error.error_type == "repository_error"
    assert error.code == "unsupported_backfill"
    assert error.details == {}
