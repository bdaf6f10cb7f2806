from latren.audio import (
    AL_NONE,
    AudioBufferData,
    AudioBufferHandle,
    AudioHandle,
    AudioSourceRelativeTo,
)


def test_default_handle_is_null():
    handle = AudioHandle()
    assert handle.is_null() is True
    assert handle.handle == AL_NONE


def test_handle_with_value_is_not_null():
    handle = AudioHandle(7)
    assert handle.is_null() is False
    assert handle.handle == 7


def test_reset_makes_handle_null():
    handle = AudioHandle(42)
    handle.reset()
    assert handle.is_null() is True
    assert handle == AudioHandle()


def test_buffer_handle_is_an_audio_handle():
    handle = AudioBufferHandle(3)
    assert isinstance(handle, AudioHandle)
    assert handle.is_null() is False


def test_buffer_data_defaults_mark_unknown_format():
    data = AudioBufferData()
    assert data.data is None
    assert data.size == 0
    assert (data.sample_rate, data.bit_depth, data.channels, data.al_format) == (-1, -1, -1, -1)


def test_buffer_data_holds_samples():
    samples = b"\x00\x01\x02\x03"
    data = AudioBufferData(data=samples, size=len(samples), sample_rate=44100, bit_depth=16, channels=2)
    assert data.data == samples
    assert data.size == len(samples)
    assert data.channels == 2


def test_relative_to_members():
    members = [AudioSourceRelativeTo(m.value) for m in AudioSourceRelativeTo]
    assert [m.name for m in members] == ["LISTENER", "WORLD_SPACE"]
    assert members[0] is AudioSourceRelativeTo.LISTENER
    assert members[0] != members[1]