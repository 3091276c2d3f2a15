from infranet.meta import Condition, ConditionStatus, Conditions
from infranet.transport import TransportURL, TransportURLSpec


def _url():
    return TransportURL(spec=TransportURLSpec(rabbitmq_cluster_name="rabbitmq"))


def test_not_ready_without_condition():
    assert _url().is_ready() is False


def test_ready_when_condition_true():
    url = _url()
    url.status.conditions.set(Condition(type="TransportURLReady", status=ConditionStatus.TRUE))
    assert url.is_ready() is True


def test_generic_ready_condition_is_not_enough():
    url = _url()
    url.status.conditions = Conditions([Condition(type="Ready", status=ConditionStatus.TRUE)])
    assert url.is_ready() is False


def test_not_ready_when_condition_false():
    url = _url()
    url.status.conditions.set(Condition(type="TransportURLReady", status=ConditionStatus.FALSE))
    assert url.is_ready() is False
    assert url.spec.rabbitmq_cluster_name == "rabbitmq"