import pytest

from tvfinder.input import (
    Input,
    InputRequest,
    InsertChar,
    SetCursor,
    StateChanged,
)

TEXT = "first second, third."


def test_format():
    input_ = Input(TEXT)
    assert str(input_) == TEXT
    assert f"{input_}" == TEXT


def test_set_cursor():
    input_ = Input(TEXT)

    resp = input_.handle(SetCursor(3))
    assert resp == StateChanged(value=False, cursor=True)
    assert input_.value == "first second, third."
    assert input_.cursor == 3

    resp = input_.handle(SetCursor(30))
    assert input_.cursor == len(TEXT)
    assert resp == StateChanged(value=False, cursor=True)

    resp = input_.handle(SetCursor(len(TEXT)))
    assert input_.cursor == len(TEXT)
    assert resp is None


def test_insert_char():
    input_ = Input(TEXT)
    req = InsertChar("x")

    resp = input_.handle(req)
    assert resp == StateChanged(value=True, cursor=True)
    assert input_.value == "first second, third.x"
    assert input_.cursor == len(TEXT) + 1

    input_.handle(req)
    assert input_.value == "first second, third.xx"
    assert input_.cursor == len(TEXT) + 2

    input_ = input_.with_cursor(3)
    input_.handle(req)
    assert input_.value == "firxst second, third.xx"
    assert input_.cursor == 4

    input_.handle(req)
    assert input_.value == "firxxst second, third.xx"
    assert input_.cursor == 5


def test_go_to_prev_char():
    input_ = Input(TEXT)
    req = InputRequest.GO_TO_PREV_CHAR

    resp = input_.handle(req)
    assert resp == StateChanged(value=False, cursor=True)
    assert input_.value == "first second, third."
    assert input_.cursor == len(TEXT) - 1

    input_ = input_.with_cursor(3)
    input_.handle(req)
    assert input_.value == "first second, third."
    assert input_.cursor == 2

    input_.handle(req)
    assert input_.value == "first second, third."
    assert input_.cursor == 1


def test_remove_unicode_chars():
    input_ = Input("¡test¡")

    resp = input_.handle(InputRequest.DELETE_PREV_CHAR)
    assert resp == StateChanged(value=True, cursor=True)
    assert input_.value == "¡test"
    assert input_.cursor == 5

    input_.handle(InputRequest.GO_TO_START)

    resp = input_.handle(InputRequest.DELETE_NEXT_CHAR)
    assert resp == StateChanged(value=True, cursor=False)
    assert input_.value == "test"
    assert input_.cursor == 0


def test_insert_unicode_chars():
    input_ = Input("¡test¡").with_cursor(5)

    resp = input_.handle(InsertChar("☆"))
    assert resp == StateChanged(value=True, cursor=True)
    assert input_.value == "¡test☆¡"
    assert input_.cursor == 6

    input_.handle(InputRequest.GO_TO_START)
    input_.handle(InputRequest.GO_TO_NEXT_CHAR)

    resp = input_.handle(InsertChar("☆"))
    assert resp == StateChanged(value=True, cursor=True)
    assert input_.value == "¡☆test☆¡"
    assert input_.cursor == 2


def test_multispace_characters():
    input_ = Input("Ｈｅｌｌｏ, ｗｏｒｌｄ!")
    assert input_.cursor == 13
    assert input_.visual_cursor() == 23
    assert input_.visual_scroll(6) == 18


def test_visual_cursor_at_start_is_zero():
    input_ = Input(TEXT).with_cursor(0)
    assert input_.visual_cursor() == 0
    assert input_.visual_scroll(4) == 0


def test_with_cursor_clamps_to_length():
    input_ = Input("abc").with_cursor(100)
    assert input_.cursor == 3


def test_with_value_moves_cursor_to_end():
    input_ = Input("abc").with_cursor(1).with_value("hello")
    assert input_.value == "hello"
    assert input_.cursor == 5


def test_reset_clears_value_and_cursor():
    input_ = Input(TEXT)
    input_.reset()
    assert input_.value == ""
    assert input_.cursor == 0


def test_go_to_prev_word_from_end():
    input_ = Input(TEXT)
    resp = input_.handle(InputRequest.GO_TO_PREV_WORD)
    assert resp == StateChanged(value=False, cursor=True)
    assert input_.cursor == TEXT.index("third")


def test_go_to_next_word_from_start():
    input_ = Input(TEXT).with_cursor(0)
    input_.handle(InputRequest.GO_TO_NEXT_WORD)
    assert input_.cursor == TEXT.index("second")
    input_.handle(InputRequest.GO_TO_NEXT_WORD)
    assert input_.cursor == TEXT.index("third")
    input_.handle(InputRequest.GO_TO_NEXT_WORD)
    assert input_.cursor == len(TEXT)


def test_delete_prev_word():
    input_ = Input(TEXT)
    resp = input_.handle(InputRequest.DELETE_PREV_WORD)
    assert resp == StateChanged(value=True, cursor=True)
    assert input_.value == "first second, "
    assert input_.cursor == len("first second, ")


def test_delete_next_word():
    input_ = Input(TEXT).with_cursor(0)
    resp = input_.handle(InputRequest.DELETE_NEXT_WORD)
    assert resp == StateChanged(value=True, cursor=False)
    assert input_.value == "second, third."
    assert input_.cursor == 0


def test_delete_line():
    input_ = Input(TEXT)
    resp = input_.handle(InputRequest.DELETE_LINE)
    assert resp == StateChanged(value=True, cursor=False)
    assert input_.value == ""
    assert input_.cursor == 0
    assert input_.handle(InputRequest.DELETE_LINE) is None


def test_delete_till_end():
    input_ = Input(TEXT).with_cursor(5)
    resp = input_.handle(InputRequest.DELETE_TILL_END)
    assert resp == StateChanged(value=True, cursor=False)
    assert input_.value == "first"
    assert input_.cursor == 5


def test_go_to_end_and_start():
    input_ = Input(TEXT).with_cursor(4)
    assert input_.handle(InputRequest.GO_TO_END) == StateChanged(
        value=False, cursor=True
    )
    assert input_.cursor == len(TEXT)
    assert input_.handle(InputRequest.GO_TO_END) is None
    input_.handle(InputRequest.GO_TO_START)
    assert input_.cursor == 0
    assert input_.handle(InputRequest.GO_TO_START) is None


@pytest.mark.parametrize(
    "request_",
    [
        InputRequest.GO_TO_PREV_CHAR,
        InputRequest.GO_TO_PREV_WORD,
        InputRequest.DELETE_PREV_CHAR,
        InputRequest.DELETE_PREV_WORD,
    ],
)
def test_backward_requests_at_start_do_nothing(request_):
    input_ = Input(TEXT).with_cursor(0)
    assert input_.handle(request_) is None
    assert input_.value == TEXT
    assert input_.cursor == 0


@pytest.mark.parametrize(
    "request_",
    [
        InputRequest.GO_TO_NEXT_CHAR,
        InputRequest.GO_TO_NEXT_WORD,
        InputRequest.DELETE_NEXT_CHAR,
        InputRequest.DELETE_NEXT_WORD,
    ],
)
def test_forward_requests_at_end_do_nothing(request_):
    input_ = Input(TEXT)
    assert input_.handle(request_) is None
    assert input_.value == TEXT
    assert input_.cursor == len(TEXT)


def test_unknown_request_raises():
    with pytest.raises(TypeError):
        Input(TEXT).handle("not a request")


def test_equality_compares_value_and_cursor():
    assert Input("abc") == Input("abc")
    assert Input("abc").with_cursor(1) == Input("abc").with_cursor(1)
    assert not Input("abc").with_cursor(1) == Input("abc")