import pytest

VALID_INI = """\
; sample configuration
key1=value1
key2 = value with spaces

[section1]
host = localhost
port=8080
enabled = true

[section2]
name = test database
user=admin
password = secret123
"""

COMMENTS_INI = """\
# database settings
[database]
host = localhost ; primary
port = 3306 # default mysql port

; server settings
[server]
address = 192.168.1.1;inline without blanks
timeout = 30   # seconds
"""

WHITESPACE_INI = (
    "   key1   =   value1   \n"
    "\t[  section1  ]\t\n"
    "  key2=value2\n"
    "key3 =\tvalue3\r\n"
    "[section2]\n"
    "key4 =   value with    spaces   \n"
)

MALFORMED_INI = """\
valid_key = valid_value
this line has no equals sign
[section1]
good_key = good_value
another bad line
[unterminated
another_good_key = another_good_value
]
"""


@pytest.fixture
def write_ini(tmp_path):
    def _write(name, content, encoding='utf-8'):
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path
    return _write


@pytest.fixture
def valid_ini(write_ini):
    return write_ini('valid.ini', VALID_INI)


@pytest.fixture
def comments_ini(write_ini):
    return write_ini('comments.ini', COMMENTS_INI)


@pytest.fixture
def whitespace_ini(write_ini):
    return write_ini('whitespace.ini', WHITESPACE_INI)


@pytest.fixture
def malformed_ini(write_ini):
    return write_ini('malformed.ini', MALFORMED_INI)
