from clappie.engine.messages import (
    Action,
    Command,
    Delayed,
    HeartbeatCheckMsg,
    PopViewMsg,
    PushViewMsg,
    Response,
    SendToClaudeMsg,
    SubmitToClaudeMsg,
    TickMsg,
    ToastMsg,
    heartbeat_cmd,
    pop_view_cmd,
    push_view_cmd,
    send_to_claude_cmd,
    submit_to_claude_cmd,
    tick_cmd,
    toast_cmd,
)


def test_push_view_cmd_carries_name_and_data():
    data = {"game": "chess"}
    assert push_view_cmd("parties/status", data)() == PushViewMsg("parties/status", data)


def test_push_view_cmd_without_data():
    assert push_view_cmd("heartbeat")().data is None


def test_pop_view_cmd():
    assert pop_view_cmd()() == PopViewMsg()


def test_toast_cmd_zero_duration_defaults_to_three_seconds():
    assert toast_cmd("Pressed!", 0)() == ToastMsg("Pressed!", 3.0)


def test_toast_cmd_keeps_given_duration():
    assert toast_cmd("hi", 1.5)().duration == 1.5


def test_submit_and_send_commands():
    assert submit_to_claude_cmd("[go-clappie] Confirm → yes")() == SubmitToClaudeMsg(
        "[go-clappie] Confirm → yes"
    )
    assert send_to_claude_cmd("draft")() == SendToClaudeMsg("draft")


def test_submit_and_send_are_distinct_messages():
    assert submit_to_claude_cmd("x")() != send_to_claude_cmd("x")()


def test_tick_and_heartbeat_are_delayed():
    assert tick_cmd(0.5) == Delayed(0.5, TickMsg())
    assert heartbeat_cmd(5.0) == Delayed(5.0, HeartbeatCheckMsg())


def test_command_defaults():
    command = Command(action=Action.POP_VIEW)
    assert (command.view, command.data, command.message, command.duration, command.no_focus) == (
        "",
        None,
        "",
        0,
        False,
    )


def test_action_round_trips_through_value():
    for action in Action:
        assert Action(action.value) is action


def test_response_defaults():
    response = Response(ok=True)
    assert response.error == "" and response.data is None