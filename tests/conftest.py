"""Shared fixtures: the User model used throughout the connector tests."""

import pytest

from caml_builder import ModelBuilder, QueryTranslator
from caml_builder.schema import FieldResolver


USER_PROPERTIES = {
    "firstName": {"type": "string", "sharepoint": {"columnName": "FirstName"}},
    "lastName": {"type": "string", "sharepoint": {"columnName": "LastName"}},
    "email": {"type": "string", "sharepoint": {"columnName": "Email"}},
    "age": {"type": "number", "sharepoint": {"columnName": "Age"}},
    "startDate": {"type": "date", "sharepoint": {"columnName": "StartDate"}},
    "isEmployee": {"type": "boolean", "sharepoint": {"columnName": "IsEmployee"}},
    "displayName": {"sharepoint": {"columnName": "DisplayName"}},
}


@pytest.fixture
def user_model():
    return ModelBuilder("User", USER_PROPERTIES, {"sharepoint": {"list": "TestUsers"}}).build()


@pytest.fixture
def resolver(user_model):
    return FieldResolver(user_model)


@pytest.fixture
def translator(user_model):
    return QueryTranslator(user_model)
