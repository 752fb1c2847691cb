from rengine.input import KEY_COUNT, InputBuffer, KeyAction


def recorder(calls, label):
    return lambda: calls.append(label)


def test_key_state_values_fixed_by_source():
    buffer = InputBuffer()
    buffer.update_key_states({65})
    assert buffer.key_state[65] == 1
    buffer.update_key_states({65})
    assert buffer.key_state[65] == 2
    buffer.update_key_states(set())
    assert buffer.key_state[65] == 0


def test_bound_callback_fires_on_matching_event():
    buffer = InputBuffer()
    calls = []
    buffer.bind_key_event(65, KeyAction.PRESS, recorder(calls, "a"))
    buffer.key_callback(65, KeyAction.PRESS)
    assert calls == ["a"]


def test_other_action_or_key_does_not_fire():
    buffer = InputBuffer()
    calls = []
    buffer.bind_key_event(65, KeyAction.PRESS, recorder(calls, "a"))
    buffer.key_callback(65, KeyAction.HOLD)
    buffer.key_callback(66, KeyAction.PRESS)
    assert calls == []


def test_second_binding_joins_existing_event():
    buffer = InputBuffer()
    calls = []
    buffer.bind_key_event(65, KeyAction.PRESS, recorder(calls, "first"))
    buffer.bind_key_event(65, KeyAction.PRESS, recorder(calls, "second"))
    assert len(buffer.key_events) == 2
    assert len(buffer.key_events[0].callback) == 2
    buffer.key_callback(65, KeyAction.PRESS)
    assert calls == ["first", "second", "second"]


def test_update_cycles_press_hold_press():
    buffer = InputBuffer()
    buffer.update_key_states({65})
    assert buffer.key_state[65] == KeyAction.PRESS
    buffer.update_key_states({65})
    assert buffer.key_state[65] == KeyAction.HOLD
    buffer.update_key_states({65})
    assert buffer.key_state[65] == KeyAction.PRESS
    buffer.update_key_states(set())
    assert buffer.key_state[65] == KeyAction.UP


def test_update_resets_all_unpressed_keys():
    buffer = InputBuffer()
    buffer.update_key_states({10, 20})
    state = buffer.key_state
    assert len(state) == KEY_COUNT
    assert {k for k, v in enumerate(state) if v != KeyAction.UP} == {10, 20}


def test_update_fires_bound_events():
    buffer = InputBuffer()
    calls = []
    buffer.bind_key_event(65, KeyAction.PRESS, recorder(calls, "press"))
    buffer.bind_key_event(65, KeyAction.HOLD, recorder(calls, "hold"))
    buffer.bind_key_event(65, KeyAction.UP, recorder(calls, "up"))
    buffer.update_key_states({65})
    buffer.update_key_states({65})
    buffer.update_key_states(())
    assert calls == ["press", "hold", "up"]


def test_keys_out_of_range_are_ignored():
    buffer = InputBuffer()
    buffer.update_key_states({KEY_COUNT + 44})
    assert all(v == KeyAction.UP for v in buffer.key_state)