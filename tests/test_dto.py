from customerapi.domain import Customer
from customerapi.dto import CreateCustomerInput, CustomerDTO, from_entity


def test_create_customer_input_to_entity():
    data = CreateCustomerInput(first_name="John", last_name="Doe", phone="[phone]")
    expected = Customer(id=0, first_name=data.first_name,
                        last_name=data.last_name, phone=data.phone)
    assert data.to_entity() == expected


def test_from_entity_maps_customer_to_dto():
    entity = Customer(id=1, first_name="Jane", last_name="Smith", phone="[phone]")
    expected = CustomerDTO(id=entity.id, first_name=entity.first_name,
                           last_name=entity.last_name, phone=entity.phone)
    assert from_entity(entity) == expected


def test_customer_dto_to_dict_uses_wire_names():
    dto = CustomerDTO(id=1, first_name="John", last_name="Doe", phone="[phone]")
    assert dto.to_dict() == {
        "id": 1,
        "first_name": "John",
        "last_name": "Doe",
        "phone": "[phone]",
    }


def test_entity_round_trip_through_input_and_dto():
    data = CreateCustomerInput(first_name="Jane", last_name="Smith", phone="[phone]")
    dto = from_entity(data.to_entity())
    assert (dto.first_name, dto.last_name, dto.phone) == ("Jane", "Smith", "[phone]")
    assert dto.id == 0