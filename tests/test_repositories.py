import pytest

from errors import EntityNotFoundError
from models import Potion
from repositories.base_repository import Page, PageRequest


def test_save_assigns_id(potion_repository):
    saved = potion_repository.save(Potion(name='Brume', description='', effect_description='', heal_amount=3))

    assert saved.id is not None
    assert potion_repository.find_by_id(saved.id).name == 'Brume'


def test_find_all_in_primary_key_order(potion_repository):
    first = potion_repository.save(Potion(name='B', heal_amount=1))
    second = potion_repository.save(Potion(name='A', heal_amount=2))

    assert [p.id for p in potion_repository.find_all()] == [first.id, second.id]


def test_find_by_id_unknown_returns_none(potion_repository):
    assert potion_repository.find_by_id(999) is None
    assert potion_repository.find_by_id(None) is None


def test_get_by_id_raises_when_missing(potion_repository):
    with pytest.raises(EntityNotFoundError) as exc:
        potion_repository.get_by_id(42)

    assert str(exc.value) == 'Potion 42 not found'
    assert exc.value.entity_id == 42


def test_get_by_id_none_raises(potion_repository):
    with pytest.raises(EntityNotFoundError):
        potion_repository.get_by_id(None)


def test_save_with_existing_id_overwrites_row(potion_repository, flamme, reload):
    potion_id = flamme.id
    potion_repository.save(Potion(id=potion_id, name='Autre', description='d',
                                  effect_description='e', heal_amount=5))

    stored = reload(Potion, potion_id)
    assert stored.name == 'Autre'
    assert stored.effect_description == 'e'
    assert potion_repository.count() == 1


def test_save_with_unknown_id_inserts_with_that_id(potion_repository):
    saved = potion_repository.save(Potion(id=77, name='Fixe', heal_amount=0))

    assert saved.id == 77
    assert potion_repository.find_by_id(77) is not None


def test_delete_removes_row(potion_repository, flamme):
    potion_id = flamme.id
    potion_repository.delete(flamme)

    assert potion_repository.find_by_id(potion_id) is None
    assert potion_repository.count() == 0


def test_first_page(qualite_repository, qualites):
    page = qualite_repository.find_all_paginated(PageRequest(page=0, size=10))

    assert [q.name for q in page.items] == [f'Qualite {i:02d}' for i in range(1, 11)]
    assert page.total_elements == 25
    assert page.total_pages == 3
    assert page.is_first and page.has_next
    assert not page.has_previous


def test_last_page_is_partial(qualite_repository, qualites):
    page = qualite_repository.find_all_paginated(PageRequest(page=2, size=10))

    assert len(page) == 5
    assert page.is_last
    assert page.has_previous


def test_page_past_the_end_is_empty_with_totals(qualite_repository, qualites):
    page = qualite_repository.find_all_paginated(PageRequest(page=9, size=10))

    assert page.items == []
    assert page.total_elements == 25
    assert page.total_pages == 3
    assert not page.has_next


def test_empty_table_has_no_pages(qualite_repository):
    page = qualite_repository.find_all_paginated(PageRequest())

    assert page.total_pages == 0
    assert page.is_first and page.is_last


def test_sort_descending(qualite_repository, qualites):
    page = qualite_repository.find_all_paginated(PageRequest(page=0, size=3, sort='name,desc'))

    assert [q.name for q in page] == ['Qualite 25', 'Qualite 24', 'Qualite 23']


def test_sort_with_ties_is_stable_across_pages(qualite_repository, qualites):
    seen = []
    for index in range(3):
        page = qualite_repository.find_all_paginated(PageRequest(page=index, size=10, sort='bonus'))
        seen.extend(q.id for q in page)

    assert len(seen) == len(set(seen)) == 25


def test_sort_on_unknown_field_is_rejected(qualite_repository, qualites):
    with pytest.raises(ValueError):
        qualite_repository.find_all_paginated(PageRequest(sort='color'))


@pytest.mark.parametrize('kwargs', [
    {'page': -1},
    {'size': 0},
    {'size': 101},
    {'sort': 'name,sideways'},
    {'sort': ',asc'},
    {'sort': 'name,asc,extra'},
])
def test_invalid_page_request(kwargs):
    with pytest.raises(ValueError):
        PageRequest(**kwargs)


def test_page_request_sort_order():
    assert PageRequest(sort='name').sort_order() == ('name', 'asc')
    assert PageRequest(sort='bonus, DESC').sort_order() == ('bonus', 'desc')
    assert PageRequest().sort_order() is None


def test_page_total_pages_rounds_up():
    assert Page(items=[], number=0, size=10, total_elements=21).total_pages == 3
