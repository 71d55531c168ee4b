"""
Search Expression Tests

Tests verify:
- Token parsing (first-colon split, email aliases, unknown fields)
- Term application against the database (AND, exact email, substring)
"""
from django.test import SimpleTestCase, TestCase

from contacts.person.dtos import SearchTerm
from contacts.person.models import Person, PersonEmail
from contacts.person.search import (
    OPERATOR_ANY,
    OPERATOR_CONTAINS,
    OPERATOR_EMAIL_EQUALS,
    apply_search_terms,
    parse_search_term,
    parse_search_terms,
)


class ParseSearchTermTests(SimpleTestCase):
    """Parsing of single tokens"""

    def test_email_field(self):
        self.assertEqual(
            parse_search_term('email:jane@example.com'),
            SearchTerm(operator=OPERATOR_EMAIL_EQUALS, value='jane@example.com', field='emails.value')
        )

    def test_emails_value_alias_matches_email(self):
        self.assertEqual(
            parse_search_term('emails.value:jane@example.com'),
            parse_search_term('email:jane@example.com')
        )

    def test_name_and_job_title_are_substring_terms(self):
        self.assertEqual(
            parse_search_term('name:jo'),
            SearchTerm(operator=OPERATOR_CONTAINS, value='jo', field='name')
        )
        self.assertEqual(
            parse_search_term('job_title:lead'),
            SearchTerm(operator=OPERATOR_CONTAINS, value='lead', field='job_title')
        )

    def test_split_on_first_colon_only(self):
        term = parse_search_term('name:a:b')
        self.assertEqual(term.field, 'name')
        self.assertEqual(term.value, 'a:b')

    def test_token_without_colon_matches_any(self):
        self.assertEqual(
            parse_search_term('smith'),
            SearchTerm(operator=OPERATOR_ANY, value='smith')
        )

    def test_unknown_field_is_dropped(self):
        with self.assertLogs('contacts.person.search', level='DEBUG'):
            self.assertIsNone(parse_search_term('phone:123'))

    def test_parse_terms_accepts_string_list_or_none(self):
        self.assertEqual(len(parse_search_terms('name:jo')), 1)
        self.assertEqual(len(parse_search_terms(['name:jo', 'phone:1', 'smith'])), 2)
        self.assertEqual(parse_search_terms(None), [])


class ApplySearchTermsTests(TestCase):
    """Applying parsed terms to Person querysets"""

    def setUp(self):
        self.jane = Person.objects.create(name='Jane Doe', job_title='Team Lead')
        PersonEmail.objects.create(person=self.jane, value='jane@example.com', label='work', position=0)
        PersonEmail.objects.create(person=self.jane, value='jd@home.org', label='home', position=1)

        self.john = Person.objects.create(name='John Smith', job_title='Engineer')
        PersonEmail.objects.create(person=self.john, value='john@example.com', label='work', position=0)

    def search(self, *tokens):
        return list(apply_search_terms(Person.objects.all(), parse_search_terms(list(tokens))))

    def test_email_equality_is_exact(self):
        self.assertEqual(self.search('email:jd@home.org'), [self.jane])
        self.assertEqual(self.search('email:home.org'), [])

    def test_name_substring(self):
        self.assertEqual(self.search('name:Smi'), [self.john])

    def test_terms_are_anded(self):
        self.assertEqual(self.search('name:J', 'job_title:Lead'), [self.jane])
        self.assertEqual(self.search('name:John', 'email:jane@example.com'), [])

    def test_each_email_term_matches_independently(self):
        # Two different emails of the same person must both be satisfied
        self.assertEqual(self.search('email:jane@example.com', 'email:jd@home.org'), [self.jane])

    def test_any_matches_name_or_email(self):
        self.assertEqual(self.search('Smith'), [self.john])
        self.assertEqual(self.search('jane@example.com'), [self.jane])

    def test_unknown_field_is_ignored(self):
        self.assertEqual(
            sorted(p.pk for p in self.search('phone:123')),
            sorted([self.jane.pk, self.john.pk])
        )

    def test_no_duplicate_rows_for_multiple_emails(self):
        self.assertEqual(self.search('j'), [self.jane, self.john])
