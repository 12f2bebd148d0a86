# tests/shared/test_enums.py
import pytest

from withapp.shared.enums import NotificationType, BoardPostType, POSTABLE_TYPES

pytestmark = pytest.mark.unit


def test_notification_type_inconnu():
    assert NotificationType("friend_request") == NotificationType.FRIEND_REQUEST
    assert NotificationType("anniversaire") == NotificationType.OTHER


def test_board_post_type_inconnu():
    assert BoardPostType("poll") == BoardPostType.OTHER
    assert BoardPostType.OTHER not in POSTABLE_TYPES
