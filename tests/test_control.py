import threading

from repulsion import EngineControl


def test_toggle_pause_returns_new_state():
    control = EngineControl()
    assert control.paused
    assert control.toggle_pause() is False
    assert not control.paused
    assert control.toggle_pause() is True


def test_pause_and_resume_are_idempotent():
    control = EngineControl(paused=False)
    control.pause()
    control.pause()
    assert control.paused
    control.resume()
    control.resume()
    assert not control.paused


def test_wait_returns_early_on_exit():
    control = EngineControl()
    assert control.wait(0.001) is False
    threading.Timer(0.01, control.request_exit).start()
    assert control.wait(5.0) is True
    assert control.exit_requested


def test_concurrent_toggles_are_not_lost():
    control = EngineControl(paused=False)

    def flip():
        for _ in range(1000):
            control.toggle_pause()

    threads = [threading.Thread(target=flip) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    # 4000 flips leave the flag where it started
    assert not control.paused
