import numpy as np
import pytest
from kineticgraphic.host import DesktopHost, SimulatedHost

# --------------------- SimulatedHost ---------------------

def test_simulated_clock_advances():
    host = SimulatedHost(start_ms=100.0)
    assert host.now() == 100.0
    assert host.advance(16) == 116.0
    host.set_time(200)
    assert host.now() == 200.0

def test_simulated_clock_rejects_going_backwards():
    host = SimulatedHost(start_ms=50.0)
    with pytest.raises(ValueError):
        host.advance(-1)
    with pytest.raises(ValueError):
        host.set_time(10)

def test_simulated_pointer():
    host = SimulatedHost(pointer=(1, 2))
    assert host.pointer_position() == (1.0, 2.0)
    host.move_pointer(7, -3)
    assert host.pointer_position() == (7.0, -3.0)

def test_transform_stack_nests_and_restores():
    """push/translate/pop must compose: inner translations are undone by pop."""
    host = SimulatedHost()
    host.push()
    host.translate(10, 20)
    host.push()
    host.translate(1, 1)
    assert np.allclose(host.origin, [11, 21])
    assert host.depth == 2

    host.pop()
    assert np.allclose(host.origin, [10, 20])
    host.pop()
    assert np.allclose(host.origin, [0, 0])
    assert host.depth == 0

def test_transform_stack_unbalanced_pop_raises():
    host = SimulatedHost()
    with pytest.raises(RuntimeError, match="push"):
        host.pop()

def test_origin_is_a_copy():
    host = SimulatedHost()
    o = host.origin
    o[0] = 500
    assert np.allclose(host.origin, [0, 0])

# --------------------- DesktopHost ---------------------

def test_desktop_host_requires_win32api(mocker):
    """Without pywin32 and without a custom pointer source, construction fails."""
    mocker.patch('kineticgraphic.host.win32api', None)
    with pytest.raises(ImportError, match="pywin32"):
        DesktopHost()

def test_desktop_host_reads_cursor_from_win32api(mocker):
    fake = mocker.patch('kineticgraphic.host.win32api')
    fake.GetCursorPos.return_value = (3, 4)

    host = DesktopHost()

    assert host.pointer_position() == (3.0, 4.0)
    fake.GetCursorPos.assert_called_once_with()

def test_desktop_host_custom_pointer_source(mocker):
    mocker.patch('kineticgraphic.host.win32api', None)
    host = DesktopHost(pointer_source=lambda: (12, 34))
    assert host.pointer_position() == (12.0, 34.0)

def test_desktop_host_clock_in_milliseconds(mocker):
    mocker.patch('time.perf_counter', return_value=2.5)
    host = DesktopHost(pointer_source=lambda: (0, 0))
    assert host.now() == pytest.approx(2500.0)
