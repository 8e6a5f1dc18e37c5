from typing import Any, Dict, Optional


def create_response(success: bool, message: Any, data: Any = None, error: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Envelope used for every error body the API returns"""
    response: Dict[str, Any] = {"success": success, "message": str(message)}
    if data is not None:
        response["data"] = data
    if error is not None:
        response["error"] = error
    return response
