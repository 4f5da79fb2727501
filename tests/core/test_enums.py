from chemnet.core.enums import DeviceErrorKind, ReactorMode


def test_reactor_mode_output_count():
    assert ReactorMode.SINGLE.output_count == 1
    assert ReactorMode.DOUBLE.output_count == 2

def test_error_kinds_are_distinct():
    values = [k.value for k in DeviceErrorKind]
    assert len(values) == len(set(values))
