# motion/errors.py

class InvalidParameter(ValueError):
    """정의역을 벗어난 입력 (음수 질량, 0 이하 감속률 등)"""

    def __init__(self, name: str, value, requirement: str):
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{name} must be {requirement} (got {value!r})")
