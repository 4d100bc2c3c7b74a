import pytest

class FailingWriter:
    '''A binary stream that fails once it has been written to limit times.'''

    def __init__(self, limit, message):
        self.limit = limit
        self.message = message
        self.written = []

    def write(self, data):
        if len(self.written) == self.limit:
            raise OSError(self.message)
        self.written.append(data)
        return len(data)

@pytest.fixture
def failing_writer():
    def make(limit, message = 'disk full'):
        return FailingWriter(limit, message)
    return make
