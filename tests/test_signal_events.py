import os
import signal

import pytest

from nshkit.signal_events import (
    MAX_SIGNAL_NUMBER,
    SIGNAL_READ_SIZE,
    SignalList,
    SignalLut,
    SignalPipe,
    setup_handler,
)


def test_signal_list_keeps_arrival_order_and_dedups():
    events = SignalList()
    events.add(10)
    events.add(2)
    events.add(10)
    assert list(events) == [10, 2]
    assert len(events) == 2
    assert 2 in events
    assert 3 not in events


@pytest.mark.parametrize("signum", [0, -1, MAX_SIGNAL_NUMBER])
def test_signal_list_rejects_out_of_range(signum):
    with pytest.raises(ValueError):
        SignalList().add(signum)


def test_lut_reports_received_signals_once():
    lut = SignalLut()
    lut.handler(10)
    lut.handler(2)
    lut.handler(2)
    events = SignalList()
    assert lut.read(events) == 2
    assert list(events) == [2, 10]

    again = SignalList()
    assert lut.read(again) == 0
    assert list(again) == []


def test_lut_read_adds_to_existing_events():
    lut = SignalLut()
    events = SignalList()
    events.add(5)
    lut.handler(7)
    assert lut.read(events) == 2
    assert list(events) == [5, 7]


def test_lut_sees_new_signal_after_read():
    lut = SignalLut()
    lut.handler(3)
    lut.read(SignalList())
    lut.handler(3)
    events = SignalList()
    lut.read(events)
    assert list(events) == [3]


def test_lut_handler_rejects_bad_signal():
    with pytest.raises(ValueError):
        SignalLut().handler(MAX_SIGNAL_NUMBER)


def test_pipe_round_trip():
    with SignalPipe() as pipe:
        assert pipe.fileno() >= 0
        assert pipe.write(signal.SIGUSR1) is True
        assert pipe.write(signal.SIGUSR2) is True
        assert pipe.write(signal.SIGUSR1) is True
        events = pipe.read(SignalList())
        assert list(events) == [signal.SIGUSR1, signal.SIGUSR2]
        assert list(pipe.read(SignalList())) == []


def test_pipe_reads_more_than_one_buffer():
    with SignalPipe() as pipe:
        for _ in range(SIGNAL_READ_SIZE):
            assert pipe.write(4)
        assert pipe.write(9)
        events = pipe.read(SignalList())
        assert list(events) == [4, 9]


def test_pipe_close_resets_descriptors():
    pipe = SignalPipe()
    pipe.open()
    pipe.close()
    assert pipe.fileno() == -1
    assert pipe.producer_fd == -1


def test_write_to_closed_pipe_warns(capsys):
    pipe = SignalPipe()
    assert pipe.write(2) is False
    assert "unexpected write error" in capsys.readouterr().err


def test_read_from_closed_pipe_raises():
    with pytest.raises(OSError):
        SignalPipe().read(SignalList())


def test_reset_forgets_without_closing():
    pipe = SignalPipe()
    consumer = pipe.open()
    producer = pipe.producer_fd
    pipe.reset()
    assert pipe.fileno() == -1
    os.write(producer, b"\x05")
    assert os.read(consumer, 1) == b"\x05"
    os.close(consumer)
    os.close(producer)


def test_setup_handler_delivers_signal():
    received = []
    old = setup_handler(signal.SIGUSR1, received.append)
    try:
        os.kill(os.getpid(), signal.SIGUSR1)
        assert received == [signal.SIGUSR1]
    finally:
        signal.signal(signal.SIGUSR1, old)
    assert signal.getsignal(signal.SIGUSR1) == old