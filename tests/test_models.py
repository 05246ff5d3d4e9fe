"""Tests for decoding provider payloads."""

from tourism_helper.models import Country, FoodItem, Hospital, PhraseEntry, Place, StatisticEntry


def test_country_from_dict_ignores_unknown_keys():
    country = Country.from_dict({
        "code": "GE", "name": "Gürcüstan", "flag_emoji": "🇬🇪",
        "capital": "Tbilisi", "language": "Gürcü", "currency": "GEL", "_id": "abc",
    })

    assert country == Country("GE", "Gürcüstan", "🇬🇪", "Tbilisi", "Gürcü", "GEL")


def test_missing_fields_get_defaults():
    place = Place.from_dict({"id": 7, "name": "Galata"})

    assert place.id == "7"
    assert place.rating == 0.0
    assert place.image_url == ""


def test_numeric_fields():
    assert Place.from_dict({"id": "p", "name": "n", "rating": "4.8"}).rating == 4.8
    assert StatisticEntry.from_dict({"id": "s", "title": "t", "percentage": None}).percentage == 0.0
    assert StatisticEntry.from_dict({"id": "s", "title": "t", "percentage": "n/a"}).percentage == 0.0


def test_list_fields():
    food = FoodItem.from_dict({"id": "f", "name": "Xinkali", "ingredients": ["ət", "xəmir"], "average_price": "5 GEL"})
    hospital = Hospital.from_dict({"id": "h", "name": "Acıbadem", "services": None, "emergency_phone": "112"})

    assert food.ingredients == ["ət", "xəmir"]
    assert food.average_price == "5 GEL"
    assert hospital.services == []
    assert hospital.emergency_phone == "112"


def test_phrase_entry():
    entry = PhraseEntry.from_dict({
        "id": "l1", "category": "salamlaşma", "azerbaijani": "Salam",
        "local_language": "Merhaba", "pronunciation": "mer-ha-ba",
    })

    assert entry.local_language == "Merhaba"
    assert entry.pronunciation == "mer-ha-ba"
