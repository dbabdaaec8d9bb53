"""Invoices app tests."""

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase, override_settings
from rest_framework.test import APIClient

from invoices.models import Invoice, Wholesaler, compute_total_amount
from invoices.numbering import financial_year_prefix
from invoices.validators import validate_wholesaler


class ValidateWholesalerTests(SimpleTestCase):
	def test_missing_fields_in_rule_order(self):
		errors = validate_wholesaler({'name': ' ', 'area': '', 'city': 'Surat'})
		self.assertEqual([e['field'] for e in errors], ['name', 'area'])
		self.assertEqual(errors[0]['message'], 'Wholesaler name is required')

	def test_each_required_field_named(self):
		base = {'name': 'Surat Traders', 'area': 'Ring Road', 'city': 'Surat'}
		expected = {'name': 'Wholesaler name is required', 'area': 'Area is required', 'city': 'City is required'}
		for field, message in expected.items():
			with self.subTest(field=field):
				errors = validate_wholesaler({**base, field: ''})
				self.assertEqual(errors, [{'field': field, 'message': message}])

	def test_optional_formats(self):
		base = {'name': 'A', 'area': 'B', 'city': 'C'}
		self.assertEqual(validate_wholesaler({**base, 'email': 'bad@', 'pincode': ''})[0]['field'], 'email')
		self.assertEqual(validate_wholesaler({**base, 'pincode': '1234'})[0]['message'], 'Pincode must be 5-6 digits')
		self.assertEqual(validate_wholesaler({**base, 'email': 'ok@shop.in', 'pincode': '395003'}), [])

	def test_column_limits_come_after_field_rules(self):
		errors = validate_wholesaler({'area': 'B', 'city': 'C', 'gst_number': 'X' * 21})
		self.assertEqual([e['field'] for e in errors], ['name', 'gst_number'])
		self.assertEqual(errors[1]['message'], 'GST number must be at most 20 characters')


class InvoiceTotalTests(TestCase):
	def test_formula_with_defaults(self):
		self.assertEqual(compute_total_amount(1000), Decimal('1180.00'))
		self.assertEqual(compute_total_amount('1000', '5', '50', '20'), Decimal('1080.00'))
		self.assertEqual(compute_total_amount(0, 0, 0, 0), Decimal('0.00'))

	def test_total_recomputed_on_every_save(self):
		invoice = Invoice.objects.create(
			invoice_number='Y24001',
			purchase_date='2024-06-01',
			gross_amount=Decimal('1000.00'),
			financial_year='2024-25',
			total_amount=Decimal('1.00'),
		)
		self.assertEqual(invoice.total_amount, Decimal('1180.00'))

		invoice.discount = Decimal('80.00')
		invoice.save()
		invoice.refresh_from_db()
		self.assertEqual(invoice.total_amount, Decimal('1100.00'))

	def test_financial_year_prefix(self):
		self.assertEqual(financial_year_prefix('2024-25'), 'Y24')


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class WholesalerApiTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.manager = get_user_model().objects.create_user(
			email='buyer@example.com',
			password='12345678',
			first_name='Buy',
			last_name='Er',
			role='shopmanager',
		)

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.manager)

	def test_create_reports_first_violation_and_persists_nothing(self):
		res = self.client.post('/api/admin/wholesalers/', data={'name': '', 'area': '', 'city': ''}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Wholesaler name is required'})

		res = self.client.post('/api/admin/wholesalers/', data={'name': 'Surat Traders', 'city': 'Surat'}, format='json')
		self.assertEqual(res.data, {'error': 'Area is required'})
		self.assertFalse(Wholesaler.objects.exists())

	def test_overlong_values_do_not_mask_the_first_rule(self):
		res = self.client.post('/api/admin/wholesalers/', data={'area': 'X', 'city': 'Y', 'pincode': '12345678901234'}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Wholesaler name is required'})

		res = self.client.post('/api/admin/wholesalers/', data={'name': 'A', 'area': 'X', 'city': 'Y', 'pincode': '12345678901234'}, format='json')
		self.assertEqual(res.data, {'error': 'Pincode must be 5-6 digits'})

		res = self.client.post('/api/admin/wholesalers/', data={'name': 'N' * 256, 'area': 'X', 'city': 'Y'}, format='json')
		self.assertEqual(res.data, {'error': 'Wholesaler name must be at most 255 characters'})
		self.assertFalse(Wholesaler.objects.exists())

	def test_create_and_update(self):
		res = self.client.post('/api/admin/wholesalers/', data={
			'name': 'Surat Traders',
			'area': 'Ring Road',
			'city': 'Surat',
			'pincode': '395003',
			'contactNumbers': ['9876543210'],
			'gstNumber': '24ABCDE1234F1Z5',
		}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['contactNumbers'], ['9876543210'])

		bad = self.client.patch(f"/api/admin/wholesalers/{res.data['id']}/", data={'pincode': '12'}, format='json')
		self.assertEqual(bad.data, {'error': 'Pincode must be 5-6 digits'})

		blank_city = self.client.patch(f"/api/admin/wholesalers/{res.data['id']}/", data={'city': '   '}, format='json')
		self.assertEqual(blank_city.data, {'error': 'City is required'})

		ok = self.client.patch(f"/api/admin/wholesalers/{res.data['id']}/", data={'state': 'Gujarat'}, format='json')
		self.assertEqual(ok.status_code, 200)
		self.assertEqual(ok.data['state'], 'Gujarat')

	def test_list_newest_update_first(self):
		first = Wholesaler.objects.create(name='A', area='a', city='x')
		Wholesaler.objects.create(name='B', area='b', city='y')
		first.save()
		res = self.client.get('/api/admin/wholesalers/')
		self.assertEqual([w['name'] for w in res.data], ['A', 'B'])

	def test_search_and_city_filter(self):
		Wholesaler.objects.create(name='Surat Traders', area='Ring Road', city='Surat')
		Wholesaler.objects.create(name='Tiruppur Knits', area='Kumaran Road', city='Tiruppur')

		res = self.client.get('/api/admin/wholesalers/', {'search': 'knits'})
		self.assertEqual([w['name'] for w in res.data], ['Tiruppur Knits'])

		res = self.client.get('/api/admin/wholesalers/', {'city': 'Surat'})
		self.assertEqual([w['name'] for w in res.data], ['Surat Traders'])


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class InvoiceApiTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.manager = get_user_model().objects.create_user(
			email='accounts@example.com',
			password='12345678',
			first_name='Acc',
			last_name='Ounts',
			role='admin',
		)
		cls.wholesaler = Wholesaler.objects.create(
			name='Surat Traders',
			area='Ring Road',
			city='Surat',
			contact_numbers=['9876543210'],
			gst_number='24ABCDE1234F1Z5',
			address='12 Textile Market',
		)

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.manager)

	def _payload(self, **extra):
		return {
			'wholesalerId': self.wholesaler.pk,
			'purchaseDate': '2024-06-01',
			'grossAmount': '1000.00',
			'financialYear': '2024-25',
			**extra,
		}

	def test_client_total_is_ignored(self):
		res = self.client.post('/api/admin/invoices/', data=self._payload(invoiceNumber='INV-1', totalAmount='5.00'), format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['totalAmount'], '1180.00')
		self.assertEqual(res.data['gstPercentage'], '18.00')

		upd = self.client.patch(f"/api/admin/invoices/{res.data['id']}/", data={'otherCost': '20.00', 'discount': '200.00'}, format='json')
		self.assertEqual(upd.data['totalAmount'], '1000.00')

	def test_auto_generated_numbers(self):
		first = self.client.post('/api/admin/invoices/', data=self._payload(autoGenerate=True), format='json')
		second = self.client.post('/api/admin/invoices/', data=self._payload(autoGenerate=True), format='json')
		other_year = self.client.post('/api/admin/invoices/', data=self._payload(autoGenerate=True, financialYear='2025-26'), format='json')
		self.assertEqual(first.data['invoiceNumber'], 'Y24001')
		self.assertEqual(second.data['invoiceNumber'], 'Y24002')
		self.assertEqual(other_year.data['invoiceNumber'], 'Y25001')

	def test_duplicate_number(self):
		self.client.post('/api/admin/invoices/', data=self._payload(invoiceNumber='INV-1'), format='json')
		res = self.client.post('/api/admin/invoices/', data=self._payload(invoiceNumber='INV-1'), format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Invoice number already exists'})

	def test_number_required_without_auto_generate(self):
		res = self.client.post('/api/admin/invoices/', data=self._payload(), format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Invoice number is required'})

	def test_list_and_detail_expand_wholesaler(self):
		invoice_id = self.client.post('/api/admin/invoices/', data=self._payload(invoiceNumber='INV-7'), format='json').data['id']

		listed = self.client.get('/api/admin/invoices/')
		summary = listed.data['invoices'][0]['wholesaler']
		self.assertEqual(set(summary), {'id', 'name', 'city', 'contactNumbers', 'gstNumber'})

		detail = self.client.get(f'/api/admin/invoices/{invoice_id}/')
		self.assertEqual(detail.data['wholesaler']['address'], '12 Textile Market')

	def test_deleted_wholesaler_renders_null(self):
		invoice_id = self.client.post('/api/admin/invoices/', data=self._payload(invoiceNumber='INV-8'), format='json').data['id']
		self.wholesaler.delete()
		detail = self.client.get(f'/api/admin/invoices/{invoice_id}/')
		self.assertIsNone(detail.data['wholesaler'])
		self.assertIsNone(detail.data['wholesalerId'])

	def test_pdf(self):
		invoice_id = self.client.post('/api/admin/invoices/', data=self._payload(invoiceNumber='INV-9'), format='json').data['id']
		res = self.client.get(f'/api/admin/invoices/{invoice_id}/pdf/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res['Content-Type'], 'application/pdf')
		self.assertTrue(res.content.startswith(b'%PDF'))

	def test_missing_invoice(self):
		res = self.client.get('/api/admin/invoices/999/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Invoice not found'})
