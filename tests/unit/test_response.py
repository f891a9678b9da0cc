"""
Response format unit tests
"""
from src.utils.response import error_response


def test_error_response():
    """Error response"""
    response = error_response("OFFICE_NOT_FOUND", "Unknown office: x", {"office_id": "x"})
    assert response["success"] is False
    assert response["data"] is None
    assert response["error"]["code"] == "OFFICE_NOT_FOUND"
    assert response["error"]["message"] == "Unknown office: x"
    assert response["error"]["details"] == {"office_id": "x"}


def test_error_response_without_details():
    """Error response without details"""
    response = error_response("SESSION_NOT_FOUND", "Session not found: sess_x")
    assert response["error"]["details"] is None
