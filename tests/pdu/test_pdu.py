import pytest

from mms_pdu import (
    AcknowledgeInd,
    EncodedStringValue,
    GenericPdu,
    NotificationInd,
    NotifyRespInd,
    PduHeaderValues,
    SendConf,
    SendReq,
    pdu_class_for,
)
from mms_shared import constants as c


def test_generic_pdu_is_not_instantiable():
    with pytest.raises(TypeError):
        GenericPdu()


def test_variants_report_their_message_type_and_default_version():
    """Each variant carries its fixed message type and the current MMS version."""
    assert SendReq().message_type == c.MESSAGE_TYPE_SEND_REQ
    assert SendConf().message_type == c.MESSAGE_TYPE_SEND_CONF
    assert NotificationInd().message_type == c.MESSAGE_TYPE_NOTIFICATION_IND
    assert SendReq().mms_version == c.CURRENT_MMS_VERSION


def test_send_req_accessors_share_header_map():
    """Values set through accessors are visible through the shared header map."""
    req = SendReq()
    req.transaction_id = "T-1"
    req.subject = "Hello"
    req.from_address = EncodedStringValue("+15550001")
    req.add_to("+15550002")
    req.add_to("+15550003")
    req.date = 1_700_000_000

    assert req.headers.get_text(c.TRANSACTION_ID) == b"T-1"
    assert req.headers.get_encoded_string(c.SUBJECT).string == "Hello"
    assert [addr.string for addr in req.to] == ["+15550002", "+15550003"]
    assert req.from_address.string == "+15550001"
    assert req.headers.get_long(c.DATE) == 1_700_000_000


def test_send_req_defaults():
    req = SendReq()

    assert req.priority == c.PRIORITY_NORMAL
    assert req.delivery_report == c.VALUE_NO
    assert req.read_report == c.VALUE_NO
    assert req.subject is None
    assert req.to == []
    assert req.body is None


def test_report_flags_set_after_construction_are_visible():
    """Delivery and read report requests set later read back immediately."""
    req = SendReq()
    req.delivery_report = c.VALUE_YES
    req.read_report = c.VALUE_YES

    assert req.delivery_report == c.VALUE_YES
    assert req.read_report == c.VALUE_YES
    assert req.headers.get_octet(c.DELIVERY_REPORT) == c.VALUE_YES


def test_setting_none_removes_header():
    req = SendReq()
    req.subject = "x"
    req.subject = None

    assert c.SUBJECT not in req.headers


def test_octet_and_long_validation():
    values = PduHeaderValues()
    with pytest.raises(ValueError):
        values.set_octet(c.PRIORITY, 0x100)
    with pytest.raises(ValueError):
        values.set_long(c.DATE, -1)


@pytest.mark.parametrize(
    "status, expected",
    [
        (c.RESPONSE_STATUS_OK, True),
        (c.RESPONSE_STATUS_ERROR_UNSPECIFIED, False),
        (c.RESPONSE_STATUS_ERROR_NETWORK_PROBLEM, False),
        (c.RESPONSE_STATUS_ERROR_UNSUPPORTED_MESSAGE, False),
        (0xC3, False),
        (0x00, False),
    ],
)
def test_send_conf_is_successful_only_for_ok(status, expected):
    """Only the registry's OK status counts as success, unknown codes included."""
    conf = SendConf()
    conf.response_status = status

    assert conf.is_successful() is expected


def test_send_conf_without_status_is_not_successful():
    assert SendConf().is_successful() is False


def test_notification_ind_accepts_past_expiry():
    ind = NotificationInd()
    ind.content_location = "http://mmsc.example/msg/1"
    ind.expiry = 1
    ind.message_size = 2048

    assert ind.expiry == 1
    assert ind.content_location == b"http://mmsc.example/msg/1"
    assert ind.message_size == 2048


def test_str_includes_type_and_header_names():
    conf = SendConf()
    conf.response_status = c.RESPONSE_STATUS_OK

    text = str(conf)
    assert text.startswith("SendConf")
    assert "Send-Confirmation" in text
    assert "Response-Status" in text
    assert "status=OK" in text


def test_notify_resp_and_acknowledge_accessors():
    resp = NotifyRespInd()
    resp.status = c.STATUS_RETRIEVED
    resp.report_allowed = c.VALUE_YES
    ack = AcknowledgeInd()
    ack.transaction_id = b"T-9"

    assert resp.status == c.STATUS_RETRIEVED
    assert resp.report_allowed == c.VALUE_YES
    assert ack.transaction_id == b"T-9"


def test_pdu_class_for():
    assert pdu_class_for(c.MESSAGE_TYPE_SEND_REQ) is SendReq
    assert pdu_class_for(c.MESSAGE_TYPE_NOTIFICATION_IND) is NotificationInd
    assert pdu_class_for(0x99) is None


@pytest.mark.parametrize("pdu_cls", [SendReq, SendConf, NotificationInd])
def test_str_names_the_variant_class(pdu_cls):
    assert str(pdu_cls()).startswith(f"{pdu_cls.__name__}[")
