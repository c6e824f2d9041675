import wave

import pytest

from xpplayer.decoder import AudioDecoder, MP3Decoder

_INTERFACE = ("load", "play", "update", "resume", "stop", "set_volume", "is_playing", "seek")


@pytest.fixture(autouse=True)
def dummy_audio(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def wav_file(tmp_path):
    path = tmp_path / "tone.wav"
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 22050)
    return path


def _noop(self, *args):
    return None


def test_abstract_decoder_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AudioDecoder()


def test_abstract_interface_lists_every_method():
    assert set(AudioDecoder.__abstractmethods__) == set(_INTERFACE)
    assert not MP3Decoder.__abstractmethods__
    decoder = MP3Decoder()
    assert decoder.is_playing() is False
    assert decoder.duration() == 0.0


@pytest.mark.parametrize("missing", _INTERFACE)
def test_subclass_missing_a_method_cannot_be_instantiated(missing):
    methods = {name: _noop for name in _INTERFACE if name != missing}
    partial = type("PartialDecoder", (AudioDecoder,), methods)
    assert set(partial.__abstractmethods__) == {missing}
    with pytest.raises(TypeError) as excinfo:
        partial()
    assert missing in str(excinfo.value)
    decoder = MP3Decoder()
    assert isinstance(decoder, AudioDecoder)
    assert callable(getattr(decoder, missing))
    assert decoder.is_playing() is False
    assert decoder.progress() == 0.0


def test_subclass_with_full_interface_can_be_instantiated():
    methods = {name: _noop for name in _INTERFACE}
    methods["is_playing"] = lambda self: True
    complete = type("CompleteDecoder", (AudioDecoder,), methods)
    decoder = complete()
    assert decoder.is_playing() is True
    mp3 = MP3Decoder()
    assert isinstance(mp3, AudioDecoder)
    assert mp3.is_playing() is False


def test_unloaded_decoder_reports_nothing():
    decoder = MP3Decoder()
    assert decoder.progress() == 0.0
    assert decoder.duration() == 0.0
    assert decoder.is_playing() is False


def test_unloaded_decoder_ignores_commands():
    decoder = MP3Decoder()
    decoder.play()
    decoder.set_volume(0.5)
    decoder.seek(0.5)
    decoder.update()
    decoder.stop()
    decoder.close()
    assert decoder.is_playing() is False
    assert decoder.progress() == 0.0


def test_loading_missing_file_raises(tmp_path):
    decoder = MP3Decoder()
    with pytest.raises(OSError):
        decoder.load(tmp_path / "missing.mp3")
    assert decoder.duration() == 0.0
    assert decoder.is_playing() is False


def test_load_seek_and_close(wav_file):
    decoder = MP3Decoder()
    decoder.load(wav_file)
    try:
        assert decoder.duration() == pytest.approx(1.0, abs=0.05)
        assert decoder.progress() == 0.0
        decoder.seek(0.5)
        assert decoder.progress() == pytest.approx(0.5, abs=0.01)
        decoder.stop()
        assert decoder.progress() == 0.0
    finally:
        decoder.close()
    assert decoder.duration() == 0.0