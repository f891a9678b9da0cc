"""
Utility function unit tests
"""
import json
from datetime import timezone
from src.utils import helpers


def test_generate_session_id():
    """Session ID generation"""
    session_id = helpers.generate_session_id()
    assert session_id.startswith("sess_")
    assert len(session_id) > 10


def test_generate_session_id_unique():
    """Session IDs do not repeat"""
    ids = {helpers.generate_session_id() for _ in range(1000)}
    assert len(ids) == 1000


def test_generate_message_id():
    """Message ID generation"""
    assert helpers.generate_message_id().startswith("msg_")


def test_mask_name():
    """Names keep only their first character"""
    assert helpers.mask_name("Jan Levinson") == "J***"
    assert helpers.mask_name("") == ""


def test_mask_personal_info_json():
    """customer_name is masked in JSON bodies, other fields are kept"""
    masked = helpers.mask_personal_info('{"office_id": "scranton", "customer_name": "Jan Levinson"}')
    payload = json.loads(masked)
    assert payload == {"office_id": "scranton", "customer_name": "J***"}


def test_mask_personal_info_without_name():
    """Bodies without a customer name are unchanged"""
    masked = helpers.mask_personal_info('{"office_id": "buffalo", "customer_name": null}')
    assert json.loads(masked) == {"office_id": "buffalo", "customer_name": None}


def test_mask_personal_info_malformed_json():
    """Malformed JSON is masked by pattern"""
    masked = helpers.mask_personal_info('{"customer_name": "Jan \\"JL\\" Levinson", "office_id"')
    assert "Levinson" not in masked
    assert '"customer_name": "J***"' in masked


def test_utc_now_is_timezone_aware():
    """utc_now returns an aware UTC datetime"""
    assert helpers.utc_now().tzinfo == timezone.utc
