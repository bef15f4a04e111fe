MSG_ID_NOT_FOUND = "아이디가 존재하지 않습니다"
MSG_NAME_MISMATCH = "이름이 다릅니다"


class PersonServiceError(RuntimeError):
    """raised by PersonService write paths (unknown id, wrong-record update)"""
    pass
