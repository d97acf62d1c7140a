from cloudjobs import Worker, register

calls = []


def reset():
    calls.clear()


@register
class AddWorker(Worker):
    def perform(self, a, b):
        calls.append((self.job_id, a, b))
        return a + b


@register
class FailingWorker(Worker):
    def perform(self, message):
        raise RuntimeError(message)


@register
class MetaWorker(Worker):
    def perform(self):
        return dict(self.job_meta)


class NotAWorker:
    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def execute(self):
        calls.append("not-a-worker")


# Registered under a name, but lacks the worker capability
register(NotAWorker)
