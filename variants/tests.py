"""Variants app tests."""

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from invoices.models import Wholesaler
from products.models import Product
from variants.kinds import KINDS
from variants.models import GarmentVariant


BLOUSE_PAYLOAD = {
	'fabricType': 'Silk',
	'workAndPrint': 'Zari',
	'bustSize': '36',
	'blouseLength': '15',
	'sleeveLength': 'Elbow',
	'blouseManufacturer': 'Sharma Textiles',
	'financialYear': '2024-25',
	'quantity': 12,
}

LEHENGA_PAYLOAD = {
	'designCode': 'LH-01',
	'designName': 'Rani',
	'lehngaType': 'A-line',
	'blouseStitching': 'Stitched',
	'skirtStitching': 'Semi',
	'fabricType': 'Georgette',
	'blouseFabric': 'Silk',
	'skirtFabric': 'Georgette',
	'dupattaFabric': 'Net',
	'workAndPrint': 'Sequins',
	'lehengaManufacturer': 'Jaipur Works',
	'financialYear': '2024-25',
	'quantity': 3,
}


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class VariantCrudTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.admin = get_user_model().objects.create_user(
			email='admin@example.com',
			password='12345678',
			first_name='Ad',
			last_name='Min',
			role='admin',
		)
		cls.wholesaler = Wholesaler.objects.create(name='Surat Traders', area='Ring Road', city='Surat')
		cls.p1 = Product.objects.create(name='Silk Blouse')
		cls.p2 = Product.objects.create(name='Cotton Blouse')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.admin)

	def _blouse(self, **extra):
		return {**BLOUSE_PAYLOAD, 'wholesalerId': self.wholesaler.pk, **extra}

	def test_nested_create_sets_parent_and_filters_by_parent(self):
		res = self.client.post(f'/api/admin/products/{self.p1.pk}/blouses/new/', data=self._blouse(), format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['parentProductId'], self.p1.pk)
		self.assertEqual(res.data['kind'], 'blouse')
		self.assertEqual(res.data['fabricType'], 'Silk')
		self.assertEqual(res.data['wholesaler'], {'id': self.wholesaler.pk, 'name': 'Surat Traders'})

		in_p1 = self.client.get('/api/admin/blouses/', {'parentId': self.p1.pk})
		in_p2 = self.client.get('/api/admin/blouses/', {'parentId': self.p2.pk})
		self.assertEqual([v['id'] for v in in_p1.data], [res.data['id']])
		self.assertEqual(in_p2.data, [])

		nested_list = self.client.get(f'/api/admin/products/{self.p1.pk}/blouses/new/')
		self.assertEqual([v['id'] for v in nested_list.data], [res.data['id']])

	def test_nested_create_path_parent_wins(self):
		res = self.client.post(
			f'/api/admin/products/{self.p1.pk}/blouses/new/',
			data=self._blouse(parentProductId=self.p2.pk),
			format='json',
		)
		self.assertEqual(res.data['parentProductId'], self.p1.pk)

	def test_nested_create_ignores_unknown_body_parent(self):
		res = self.client.post(
			f'/api/admin/products/{self.p1.pk}/blouses/new/',
			data=self._blouse(parentProductId=99999),
			format='json',
		)
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['parentProductId'], self.p1.pk)

	def test_nested_create_unknown_product(self):
		res = self.client.post('/api/admin/products/9999/blouses/new/', data=self._blouse(), format='json')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Product not found'})

	def test_create_requires_kind_fields(self):
		payload = self._blouse()
		del payload['bustSize']
		res = self.client.post('/api/admin/blouses/', data=payload, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'bustSize: This field is required.'})

	def test_negative_quantity_rejected(self):
		res = self.client.post('/api/admin/blouses/', data=self._blouse(quantity=-1), format='json')
		self.assertEqual(res.status_code, 400)

	def test_parent_must_exist(self):
		res = self.client.post('/api/admin/blouses/', data=self._blouse(parentProductId=9999), format='json')
		self.assertEqual(res.status_code, 400)
		self.assertFalse(GarmentVariant.objects.exists())

	def test_lehenga_defaults_and_whitelist_update(self):
		res = self.client.post('/api/admin/3pc-lehengas/', data={**LEHENGA_PAYLOAD, 'wholesalerId': self.wholesaler.pk}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertIs(res.data['hasKenken'], False)
		self.assertIsNone(res.data['parentProductId'])

		variant_id = res.data['id']
		upd = self.client.patch(
			f'/api/admin/3pc-lehengas/{variant_id}/',
			data={'quantity': 5, 'hasKenken': True, 'bogus': 'ignored', 'kind': 'blouse'},
			format='json',
		)
		self.assertEqual(upd.status_code, 200)
		variant = GarmentVariant.objects.get(pk=variant_id)
		self.assertEqual(variant.quantity, 5)
		self.assertEqual(variant.kind, 'three_pc_lehenga')
		self.assertTrue(variant.attributes['hasKenken'])
		self.assertEqual(variant.attributes['designCode'], 'LH-01')
		self.assertNotIn('bogus', variant.attributes)

	def test_put_on_blouse_also_drops_unknown_keys(self):
		variant = self.client.post('/api/admin/blouses/', data=self._blouse(), format='json').data
		res = self.client.put(
			f"/api/admin/blouses/{variant['id']}/",
			data=self._blouse(fabricType='Cotton', designCode='LH-99'),
			format='json',
		)
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['fabricType'], 'Cotton')
		self.assertNotIn('designCode', GarmentVariant.objects.get(pk=variant['id']).attributes)

	def test_kinds_are_separate_collections(self):
		self.client.post('/api/admin/blouses/', data=self._blouse(), format='json')
		self.assertEqual(self.client.get('/api/admin/one-pc-kurtis/').data, [])
		blouse = GarmentVariant.objects.get()
		self.assertEqual(self.client.get(f'/api/admin/one-pc-kurtis/{blouse.pk}/').status_code, 404)

	def test_read_and_delete(self):
		variant_id = self.client.post('/api/admin/blouses/', data=self._blouse(), format='json').data['id']
		res = self.client.get(f'/api/admin/blouses/{variant_id}/')
		self.assertEqual(res.data['wholesaler']['name'], 'Surat Traders')

		gone = self.client.delete(f'/api/admin/blouses/{variant_id}/')
		self.assertEqual(gone.data, {'message': 'Deleted'})
		missing = self.client.get(f'/api/admin/blouses/{variant_id}/')
		self.assertEqual(missing.status_code, 404)
		self.assertEqual(missing.data, {'error': 'Blouse not found'})

	def test_deleting_parent_or_wholesaler_clears_reference(self):
		res = self.client.post(f'/api/admin/products/{self.p2.pk}/blouses/new/', data=self._blouse(), format='json')
		self.p2.delete()
		self.wholesaler.delete()
		variant = self.client.get(f"/api/admin/blouses/{res.data['id']}/").data
		self.assertIsNone(variant['parentProductId'])
		self.assertIsNone(variant['wholesaler'])

	def test_product_variant_summary(self):
		self.client.post(f'/api/admin/products/{self.p1.pk}/blouses/new/', data=self._blouse(quantity=4), format='json')
		self.client.post(f'/api/admin/products/{self.p1.pk}/blouses/new/', data=self._blouse(quantity=6), format='json')
		self.client.post(
			f'/api/admin/products/{self.p1.pk}/3pc-lehengas/new/',
			data={**LEHENGA_PAYLOAD, 'wholesalerId': self.wholesaler.pk},
			format='json',
		)

		res = self.client.get(f'/api/admin/products/{self.p1.pk}/variants/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['kinds']['blouses']['count'], 2)
		self.assertEqual(res.data['kinds']['blouses']['quantity'], 10)
		self.assertEqual(res.data['kinds']['3pc-lehengas']['quantity'], 3)
		self.assertEqual(res.data['kinds']['one-pc-kurtis']['variants'], [])
		self.assertEqual(res.data['totalQuantity'], 13)


class KindRegistryTests(TestCase):
	def test_three_piece_kurti_extends_two_piece(self):
		two = KINDS['two_pc_kurti'].field_names
		three = KINDS['three_pc_kurti'].field_names
		self.assertEqual(three[:len(two)], two)
		self.assertEqual(three[len(two):], ['dupattaLength', 'dupattaWidth'])

	def test_resources(self):
		self.assertEqual(
			sorted(kind.resource for kind in KINDS.values()),
			sorted(['blouses', 'one-pc-kurtis', 'two-pc-kurtis', 'three-pc-kurtis', 'petticoat-kurtis', '3pc-lehengas']),
		)
