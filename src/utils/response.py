"""
Common response formats
"""
from typing import Any, Optional, Dict


def error_response(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Build an error response body

    Args:
        code: error code
        message: error message
        details: additional details

    Returns:
        error response dictionary
    """
    return {
        "success": False,
        "data": None,
        "error": {
            "code": code,
            "message": message,
            "details": details
        }
    }
