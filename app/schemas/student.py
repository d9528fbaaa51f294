from pydantic import BaseModel, ConfigDict, field_validator


class StudentBase(BaseModel):
    name: str
    email: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def email_has_at_sign(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Email is required")
        if "@" not in v:
            raise ValueError("Invalid email format")
        return v


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    pass


class StudentInDB(BaseModel):
    # Rows read back from the store are not re-validated
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class Student(StudentInDB):
    pass
