from dataclasses import dataclass

from .models import User, Address


@dataclass
class AddressDTO:
    id: int
    country: str
    city: str
    street: str
    zip_code: str


@dataclass
class UserDTO:
    id: int
    email: str
    name: str
    age: int
    address: AddressDTO


@dataclass
class UpdateResult:
    affected: int


@dataclass
class LoginResult:
    access_token: str


def address_to_dto(a: Address) -> AddressDTO:
    return AddressDTO(
        id=a.id,
        country=a.country,
        city=a.city,
        street=a.street,
        zip_code=a.zip_code,
    )


def user_to_dto(u: User) -> UserDTO:
    return UserDTO(
        id=u.id,
        email=u.email,
        name=u.name,
        age=u.age,
        address=address_to_dto(u.address),
    )
