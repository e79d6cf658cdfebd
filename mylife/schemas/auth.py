"""Pydantic schemas for signup, login and the current user."""
from pydantic import BaseModel

from mylife.schemas.base import CamelSchema


class SignupSchema(BaseModel):
    email: str
    name: str
    password: str


class LoginSchema(BaseModel):
    email: str
    password: str


class UserOutSchema(CamelSchema):
    id: str
    email: str
    name: str


class AuthOutSchema(CamelSchema):
    user: UserOutSchema
    token: str


class MeOutSchema(CamelSchema):
    user: UserOutSchema
