"""Tests for the shared slug helpers and the API error shape."""

from django.test import SimpleTestCase, TestCase
from rest_framework import serializers
from rest_framework.exceptions import NotFound

from core.exceptions import api_exception_handler, first_error_message
from core.slugs import generate_slug, unique_slug
from products.models import Category


class GenerateSlugTests(SimpleTestCase):
	def test_basic_cases(self):
		self.assertEqual(generate_slug('Red Saree'), 'red-saree')
		self.assertEqual(generate_slug('  Kurti -- 3 Pc!! '), 'kurti-3-pc')
		self.assertEqual(generate_slug('Blouse & Lehenga\tSet'), 'blouse-lehenga-set')
		self.assertEqual(generate_slug('---'), '')
		self.assertEqual(generate_slug(None), '')

	def test_idempotent(self):
		samples = [
			'Red Saree', 'A  B   C', '--lead and trail--', 'ÜNICODE name', 'x_y_z',
			'100% Cotton', 'multi\n\nline', '-', '', 'already-a-slug',
		]
		for value in samples:
			with self.subTest(value=value):
				once = generate_slug(value)
				self.assertEqual(generate_slug(once), once)


class UniqueSlugTests(TestCase):
	def test_collisions_get_numeric_suffix(self):
		Category.objects.create(name='Sarees')
		Category.objects.create(name='Sarees')
		self.assertEqual(unique_slug(Category, 'Sarees'), 'sarees-2')
		self.assertEqual(
			sorted(Category.objects.values_list('slug', flat=True)),
			['sarees', 'sarees-1'],
		)

	def test_empty_slug_falls_back_to_model_name(self):
		self.assertEqual(unique_slug(Category, '!!!'), 'category')


class ErrorShapeTests(SimpleTestCase):
	def test_first_error_message(self):
		self.assertEqual(first_error_message({'non_field_errors': ['All fields are required']}), 'All fields are required')
		self.assertEqual(first_error_message({'quantity': ['Must be positive.']}), 'quantity: Must be positive.')
		self.assertEqual(first_error_message({'detail': 'Not found.'}), 'Not found.')
		self.assertEqual(first_error_message(['first', 'second']), 'first')

	def test_handler_wraps_drf_errors(self):
		response = api_exception_handler(serializers.ValidationError('Coupon has expired'), {})
		self.assertEqual(response.status_code, 400)
		self.assertEqual(response.data, {'error': 'Coupon has expired'})

		response = api_exception_handler(NotFound('Product not found'), {})
		self.assertEqual(response.status_code, 404)
		self.assertEqual(response.data, {'error': 'Product not found'})

	def test_handler_hides_unexpected_errors(self):
		with self.assertLogs('core.exceptions', level='ERROR'):
			response = api_exception_handler(RuntimeError('db exploded'), {'view': None})
		self.assertEqual(response.status_code, 500)
		self.assertEqual(response.data, {'error': 'Internal server error'})
