"""
PersonService Tests

Tests verify:
- Listing and search are restricted by the caller's view permission
- Create/update/delete publish before/after notifications in order
- Contact numbers without a value are never persisted
- Mass delete skips unknown ids and survives per-id failures
"""
from unittest import mock

from django.test import TestCase

from contacts.organization.models import Organization
from contacts.person.dtos import PersonWriteDTO
from contacts.person.models import Person, PersonEmail
from contacts.person.services import PersonService, PersonEvents
from core.attributes.models import Attribute
from core.base.test_utils import create_user
from core.events import EventDispatcher
from core.user_accounts.models import CustomUser


class RecordingDispatcher(EventDispatcher):
    """Dispatcher that remembers every notification"""

    def __init__(self):
        super().__init__()
        self.events = []

    def dispatch(self, name, payload=None):
        self.events.append((name, payload))
        return super().dispatch(name, payload)

    @property
    def names(self):
        return [name for name, _ in self.events]


def person_dto(**overrides):
    data = dict(
        name='Jane Doe',
        job_title='Team Lead',
        emails=[{'value': 'jane@example.com', 'label': 'work'}],
        contact_numbers=[{'value': '+1-555-0100', 'label': 'mobile'}],
    )
    data.update(overrides)
    return PersonWriteDTO(**data)


class PersonServiceCreateTests(TestCase):

    def setUp(self):
        self.user = create_user('owner@example.com')
        self.events = RecordingDispatcher()

    def test_create_persists_person_and_entries(self):
        person = PersonService.create(self.user, person_dto(
            emails=[
                {'value': 'jane@example.com', 'label': 'work'},
                {'value': 'jane@home.org', 'label': 'home'},
            ]
        ), self.events)

        self.assertEqual(person.name, 'Jane Doe')
        self.assertEqual(person.user_id, self.user.pk)
        self.assertEqual(person.email_values, ['jane@example.com', 'jane@home.org'])
        self.assertEqual(person.contact_numbers.count(), 1)

    def test_create_notifications_order(self):
        person = PersonService.create(self.user, person_dto(), self.events)

        self.assertEqual(self.events.events, [
            (PersonEvents.CREATE_BEFORE, None),
            (PersonEvents.CREATE_AFTER, person),
        ])

    def test_create_strips_contact_numbers_without_value(self):
        person = PersonService.create(self.user, person_dto(contact_numbers=[
            {'value': '111', 'label': 'a'},
            {'value': None, 'label': 'b'},
            {'value': '333', 'label': 'c'},
        ]), self.events)

        self.assertEqual(
            [(n.value, n.label) for n in person.contact_numbers.all()],
            [('111', 'a'), ('333', 'c')]
        )

    def test_create_with_organization_and_owner(self):
        organization = Organization.objects.create(name='Acme')
        other = create_user('other@example.com')

        person = PersonService.create(self.user, person_dto(
            organization_id=organization.pk,
            user_id=other.pk,
        ), self.events)

        self.assertEqual(person.organization, organization)
        self.assertEqual(person.user_id, other.pk)

    def test_create_saves_attribute_values(self):
        Attribute.objects.create(code='linkedin', name='LinkedIn', entity_type='persons')

        person = PersonService.create(self.user, person_dto(attributes={'linkedin': 'in/jane'}), self.events)

        self.assertEqual(person.attribute_values.get().value, 'in/jane')


class PersonServiceSanitizeTests(TestCase):

    def test_missing_contact_numbers_becomes_empty_list(self):
        self.assertEqual(PersonService.sanitize_person_data({'name': 'X'}), {'name': 'X', 'contact_numbers': []})
        self.assertEqual(PersonService.sanitize_person_data({'contact_numbers': None})['contact_numbers'], [])

    def test_order_and_other_keys_preserved(self):
        data = {
            'name': 'X',
            'contact_numbers': [
                {'value': '1', 'label': 'a'},
                {'label': 'no value'},
                {'value': '2', 'label': 'b'},
            ],
        }
        sanitized = PersonService.sanitize_person_data(data)

        self.assertEqual(sanitized['name'], 'X')
        self.assertEqual([n['value'] for n in sanitized['contact_numbers']], ['1', '2'])
        self.assertEqual(len(data['contact_numbers']), 3)


class PersonServiceUpdateTests(TestCase):

    def setUp(self):
        self.user = create_user('owner@example.com')
        self.events = RecordingDispatcher()
        self.person = PersonService.create(self.user, person_dto(), EventDispatcher())

    def test_update_replaces_scalars_and_lists(self):
        person = PersonService.update(self.person.pk, person_dto(
            name='Jane Roe',
            job_title=None,
            emails=[{'value': 'roe@example.com', 'label': 'work'}],
            contact_numbers=[{'value': '999', 'label': 'desk'}],
        ), self.events)

        self.assertEqual(person.name, 'Jane Roe')
        self.assertIsNone(person.job_title)
        self.assertEqual(person.email_values, ['roe@example.com'])
        self.assertEqual([n.value for n in person.contact_numbers.all()], ['999'])
        self.assertEqual(PersonEmail.objects.filter(person=person).count(), 1)

    def test_update_keeps_optional_fields_not_provided(self):
        person = PersonService.update(self.person.pk, PersonWriteDTO(
            name='Jane Roe',
            emails=[{'value': 'roe@example.com', 'label': 'work'}],
            contact_numbers=[{'value': '999', 'label': 'desk'}],
            provided=frozenset({'name', 'emails', 'contact_numbers'}),
        ), self.events)

        self.assertEqual(person.name, 'Jane Roe')
        self.assertEqual(person.job_title, 'Team Lead')
        self.assertEqual(person.user_id, self.user.pk)

    def test_update_notifications(self):
        person = PersonService.update(self.person.pk, person_dto(), self.events)

        self.assertEqual(self.events.events, [
            (PersonEvents.UPDATE_BEFORE, self.person.pk),
            (PersonEvents.UPDATE_AFTER, person),
        ])

    def test_update_unknown_person_raises(self):
        with self.assertRaises(Person.DoesNotExist):
            PersonService.update(999, person_dto(), self.events)


class PersonServiceDeleteTests(TestCase):

    def setUp(self):
        self.user = create_user('owner@example.com')
        self.events = RecordingDispatcher()
        self.person = PersonService.create(self.user, person_dto(), EventDispatcher())

    def test_delete(self):
        PersonService.delete(self.person.pk, self.events)

        self.assertFalse(Person.objects.filter(pk=self.person.pk).exists())
        self.assertEqual(self.events.events, [
            (PersonEvents.DELETE_BEFORE, self.person.pk),
            (PersonEvents.DELETE_AFTER, self.person.pk),
        ])

    def test_delete_unknown_person_raises_after_before_notification(self):
        with self.assertRaises(Person.DoesNotExist):
            PersonService.delete(999, self.events)

        self.assertEqual(self.events.names, [PersonEvents.DELETE_BEFORE])

    def test_mass_delete_skips_unknown_ids(self):
        result = PersonService.mass_delete([self.person.pk, 999], self.events)

        self.assertEqual(result.deleted, [self.person.pk])
        self.assertEqual(result.skipped, [999])
        self.assertFalse(Person.objects.filter(pk=self.person.pk).exists())
        self.assertEqual(self.events.events, [
            ('contact.person.delete.before', self.person.pk),
            ('contact.person.delete.after', self.person.pk),
        ])

    def test_mass_delete_continues_after_failure(self):
        second = PersonService.create(self.user, person_dto(name='John'), EventDispatcher())
        original_delete = Person.delete

        def flaky_delete(instance, *args, **kwargs):
            if instance.pk == self.person.pk:
                raise RuntimeError('store unavailable')
            return original_delete(instance, *args, **kwargs)

        with mock.patch.object(Person, 'delete', flaky_delete):
            with self.assertLogs('contacts.person.services.person_service', level='ERROR'):
                result = PersonService.mass_delete([self.person.pk, second.pk], self.events)

        self.assertEqual(result.failed, [self.person.pk])
        self.assertEqual(result.deleted, [second.pk])
        self.assertTrue(Person.objects.filter(pk=self.person.pk).exists())
        self.assertFalse(Person.objects.filter(pk=second.pk).exists())


class PersonServiceVisibilityTests(TestCase):
    """Listing and search respect the caller's view permission"""

    def setUp(self):
        self.alice = create_user('alice@example.com', view_permission=CustomUser.VIEW_GROUP, groups=['sales'])
        self.bob = create_user('bob@example.com', view_permission=CustomUser.VIEW_INDIVIDUAL, groups=['sales'])
        self.carol = create_user('carol@example.com', groups=['support'])

        events = EventDispatcher()
        self.alice_person = PersonService.create(self.alice, person_dto(name='Alice Contact'), events)
        self.bob_person = PersonService.create(self.bob, person_dto(name='Bob Contact'), events)
        self.carol_person = PersonService.create(self.carol, person_dto(name='Carol Contact'), events)

    def test_global_user_sees_everything(self):
        self.assertEqual(PersonService.list_persons(self.carol).count(), 3)

    def test_group_user_sees_group_members_and_self(self):
        self.assertEqual(
            set(PersonService.list_persons(self.alice)),
            {self.alice_person, self.bob_person}
        )

    def test_individual_user_sees_own_records(self):
        self.assertEqual(list(PersonService.list_persons(self.bob)), [self.bob_person])

    def test_search_is_restricted_like_listing(self):
        self.assertEqual(list(PersonService.search(self.bob, 'name:Contact')), [self.bob_person])
        self.assertEqual(
            list(PersonService.search(self.alice, ['name:Contact'])),
            [self.alice_person, self.bob_person]
        )

    def test_list_sorting(self):
        self.assertEqual(
            list(PersonService.list_persons(self.carol)),
            [self.carol_person, self.bob_person, self.alice_person]
        )
        self.assertEqual(
            [p.name for p in PersonService.list_persons(self.carol, sort='name', order='asc')],
            ['Alice Contact', 'Bob Contact', 'Carol Contact']
        )

    def test_list_ignores_unknown_sort_column(self):
        self.assertEqual(
            list(PersonService.list_persons(self.carol, sort='password', order='asc')),
            [self.alice_person, self.bob_person, self.carol_person]
        )
