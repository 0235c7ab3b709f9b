from atlas2obj.utils import JsonHandler, Log, log_lifecycle, measure_time


def test_json_handler_strips_trailing_commas():
    assert JsonHandler.loads('{"a": [1, 2,], "b": {"c": 3,},}') == {"a": [1, 2], "b": {"c": 3}}


def test_errors_go_to_stderr(capsys):
    Log.error("boom")
    Log.info("fine")
    captured = capsys.readouterr()
    assert "boom" in captured.err
    assert "fine" in captured.out


def test_decorators_preserve_result(capsys):
    class Worker:
        @log_lifecycle
        def work(self, x):
            return x * 2

    @measure_time
    def slow(x):
        return x + 1

    assert Worker().work(4) == 8
    assert slow(1) == 2
    out = capsys.readouterr().out
    assert "Starting: Worker.work" in out
    assert "'slow' took" in out
