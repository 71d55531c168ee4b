"""
Person Service - Business Logic Layer

Handles the person lifecycle:
- Listing and searching (restricted to the caller's visible owners)
- Creating and fully updating persons
- Single and mass deletion

The caller (`user`) and the notification sink (`events`) are passed into
every operation; nothing here reads request or global state.
"""
import logging

from django.db import transaction

from contacts.person.dtos import MassDeleteResult
from contacts.person.models import Person, PersonEmail, PersonContactNumber
from contacts.person.search import apply_search_terms, parse_search_terms
from contacts.person.serializers.person_serializers import PERSON_ENTITY_TYPE
from core.attributes.services import AttributeValueService
from core.user_accounts.services import get_authorized_user_ids

logger = logging.getLogger(__name__)


class PersonEvents:
    """Lifecycle notification channels"""
    CREATE_BEFORE = 'contacts.person.create.before'
    CREATE_AFTER = 'contacts.person.create.after'
    UPDATE_BEFORE = 'contacts.person.update.before'
    UPDATE_AFTER = 'contacts.person.update.after'
    DELETE_BEFORE = 'contacts.person.delete.before'
    DELETE_AFTER = 'contacts.person.delete.after'

    # Mass delete has always published on the singular 'contact.' prefix;
    # listeners subscribe to both families.
    MASS_DELETE_BEFORE = 'contact.person.delete.before'
    MASS_DELETE_AFTER = 'contact.person.delete.after'


class PersonService:
    """Service layer for person lifecycle management"""

    SORTABLE_FIELDS = ('id', 'name', 'job_title', 'created_at', 'updated_at')
    SCALAR_FIELDS = ('name', 'job_title', 'organization_id', 'user_id')

    @staticmethod
    def base_queryset():
        """Persons with organization and attribute values eagerly loaded"""
        return Person.objects.select_related('organization').prefetch_related(
            'emails',
            'contact_numbers',
            'attribute_values__attribute',
        )

    @staticmethod
    def list_persons(user, sort=None, order=None):
        """
        Get the persons visible to a user.

        Args:
            user: Caller; their view permission restricts the owners
            sort: Column from SORTABLE_FIELDS (default: id)
            order: 'asc' or 'desc' (default: desc)

        Returns:
            QuerySet of Person
        """
        return PersonService.base_queryset().visible_to(
            get_authorized_user_ids(user)
        ).ordered_by(
            sort or 'id',
            order or 'desc',
            allowed=PersonService.SORTABLE_FIELDS,
        )

    @staticmethod
    def get_person(person_id):
        """
        Get one person.

        Raises:
            Person.DoesNotExist: If no person has this id
        """
        return PersonService.base_queryset().get(pk=person_id)

    @staticmethod
    def search(user, search):
        """
        Search persons visible to a user.

        Args:
            user: Caller; their view permission restricts the owners
            search: One token or a sequence of tokens (see contacts.person.search)

        Returns:
            QuerySet of Person ordered by id
        """
        terms = parse_search_terms(search)
        persons = apply_search_terms(PersonService.base_queryset(), terms)
        persons = persons.visible_to(get_authorized_user_ids(user))
        return persons.order_by('id')

    @staticmethod
    def sanitize_person_data(data):
        """
        Return a copy of `data` whose contact_numbers is always a list
        without entries lacking a value. Order and all other keys are kept.
        """
        data = dict(data)
        contact_numbers = data.get('contact_numbers') or []
        data['contact_numbers'] = [
            entry for entry in contact_numbers
            if entry is not None and entry.get('value') is not None
        ]
        return data

    @staticmethod
    def create(user, dto, events):
        """
        Create a person.

        Args:
            user: Caller; becomes the owner unless dto carries user_id
            dto: PersonWriteDTO
            events: EventDispatcher receiving the lifecycle notifications

        Returns:
            Person: Newly created person
        """
        events.dispatch(PersonEvents.CREATE_BEFORE)

        data = PersonService.sanitize_person_data(dto.to_dict())

        with transaction.atomic():
            person = Person.objects.create(
                name=data['name'],
                job_title=data.get('job_title'),
                organization_id=data.get('organization_id'),
                user_id=data.get('user_id') or (user.pk if user is not None else None),
            )
            PersonService._replace_entries(person, PersonEmail, data.get('emails') or [])
            PersonService._replace_entries(person, PersonContactNumber, data['contact_numbers'])
            AttributeValueService.save_values(person, PERSON_ENTITY_TYPE, data.get('attributes') or {})

        person = PersonService.get_person(person.pk)
        logger.info(f"Created person #{person.pk}")

        events.dispatch(PersonEvents.CREATE_AFTER, person)
        return person

    @staticmethod
    def update(person_id, dto, events):
        """
        Fully update a person.

        Scalar fields provided in `dto` are replaced; the email and contact
        number lists are replaced wholesale.

        Raises:
            Person.DoesNotExist: If no person has this id
        """
        events.dispatch(PersonEvents.UPDATE_BEFORE, person_id)

        data = PersonService.sanitize_person_data(dto.to_dict())

        with transaction.atomic():
            person = Person.objects.select_for_update().get(pk=person_id)

            for field in PersonService.SCALAR_FIELDS:
                if field in data:
                    setattr(person, field, data[field])
            person.save()

            if 'emails' in data:
                PersonService._replace_entries(person, PersonEmail, data['emails'])
            PersonService._replace_entries(person, PersonContactNumber, data['contact_numbers'])
            AttributeValueService.save_values(person, PERSON_ENTITY_TYPE, data.get('attributes') or {})

        person = PersonService.get_person(person.pk)
        logger.info(f"Updated person #{person.pk}")

        events.dispatch(PersonEvents.UPDATE_AFTER, person)
        return person

    @staticmethod
    def delete(person_id, events):
        """
        Permanently delete a person.

        Raises:
            Person.DoesNotExist: If no person has this id
        """
        events.dispatch(PersonEvents.DELETE_BEFORE, person_id)

        with transaction.atomic():
            Person.objects.get(pk=person_id).delete()

        logger.info(f"Deleted person #{person_id}")
        events.dispatch(PersonEvents.DELETE_AFTER, person_id)

    @staticmethod
    def mass_delete(person_ids, events):
        """
        Delete many persons, one at a time.

        Unknown ids are skipped without notification. A failure on one id is
        logged and the remaining ids are still processed.

        Returns:
            MassDeleteResult
        """
        result = MassDeleteResult()

        for person_id in person_ids:
            person = Person.objects.filter(pk=person_id).first()

            if person is None:
                result.skipped.append(person_id)
                continue

            try:
                events.dispatch(PersonEvents.MASS_DELETE_BEFORE, person_id)
                with transaction.atomic():
                    person.delete()
                events.dispatch(PersonEvents.MASS_DELETE_AFTER, person_id)
            except Exception:
                logger.exception(f"Failed to delete person #{person_id} during mass delete")
                result.failed.append(person_id)
                continue

            result.deleted.append(person_id)

        logger.info(
            f"Mass delete: {len(result.deleted)} deleted, "
            f"{len(result.skipped)} skipped, {len(result.failed)} failed"
        )
        return result

    @staticmethod
    def _replace_entries(person, entry_model, entries):
        """
        Helper: Replace a person's email or contact number list, keeping order.
        """
        entry_model.objects.filter(person=person).delete()
        entry_model.objects.bulk_create([
            entry_model(
                person=person,
                value=entry['value'],
                label=entry.get('label') or '',
                position=position,
            )
            for position, entry in enumerate(entries)
        ])
