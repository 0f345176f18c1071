import os

TEST_FILE_DIR = os.path.join(os.path.dirname(__file__), "test_files")


def get_test_file(file_name: str) -> str:
    """Helper function to open and read test files."""
    filepath = os.path.join(TEST_FILE_DIR, file_name)
    with open(filepath, "r", encoding="utf-8") as f:
        text = f.read()
    return text


def calendar_text(*lines, header=("VERSION:2.0", "PRODID:-//Test//EN")) -> str:
    """Wrap property and component lines in a VCALENDAR block."""
    return "\r\n".join(("BEGIN:VCALENDAR", *header, *lines, "END:VCALENDAR")) + "\r\n"


def event_text(*lines, uid="UID:test@example.com", dtstart="DTSTART:20240101T100000Z") -> str:
    """Wrap property lines in a VEVENT inside a VCALENDAR block."""
    required = [line for line in (uid, dtstart) if line]
    return calendar_text("BEGIN:VEVENT", *required, *lines, "END:VEVENT")
