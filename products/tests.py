"""Products app tests."""

import shutil
import tempfile
from io import BytesIO

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from PIL import Image
from rest_framework.test import APIClient

from products.models import Category, HeaderCategory, Product, ShowcaseItem


def _staff(email='manager@example.com', role='shopmanager'):
	return get_user_model().objects.create_user(
		email=email,
		password='12345678',
		first_name='Shop',
		last_name='Manager',
		role=role,
	)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class AdminProductTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.manager = _staff()
		cls.customer = _staff(email='customer@example.com', role='user')
		cls.category = Category.objects.create(name='Sarees')

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.manager)

	def test_create_generates_unique_slug(self):
		res1 = self.client.post('/api/admin/products/', data={'name': 'Red Saree', 'price': '999.00'}, format='json')
		res2 = self.client.post('/api/admin/products/', data={'name': 'Red Saree', 'price': '899.00'}, format='json')
		self.assertEqual(res1.status_code, 201)
		self.assertEqual(res2.status_code, 201)
		self.assertEqual(res1.data['slug'], 'red-saree')
		self.assertEqual(res2.data['slug'], 'red-saree-1')
		self.assertEqual(res1.data['status'], 'draft')
		self.assertEqual(res1.data['gst'], '0%')

	def test_create_requires_name(self):
		res = self.client.post('/api/admin/products/', data={'price': '10.00'}, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertEqual(res.data, {'error': 'Product name is required for slug generation'})

	def test_rename_keeps_slug_but_explicit_slug_wins(self):
		product = Product.objects.create(name='Blue Kurti')
		res = self.client.patch(f'/api/admin/products/{product.pk}/', data={'name': 'Navy Kurti'}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['slug'], 'blue-kurti')

		res = self.client.patch(f'/api/admin/products/{product.pk}/', data={'slug': 'navy-kurti'}, format='json')
		self.assertEqual(res.data['slug'], 'navy-kurti')

	def test_list_meta_and_sorting(self):
		for name, price in [('Cheap', '100.00'), ('Mid', '500.00'), ('Dear', '900.00')]:
			Product.objects.create(name=name, price=price, category=self.category)

		res = self.client.get('/api/admin/products/', {'sortBy': 'highToLow', 'per_page': 2})
		self.assertEqual(res.status_code, 200)
		self.assertEqual([p['name'] for p in res.data['products']], ['Dear', 'Mid'])
		self.assertEqual(res.data['meta'], {'totalProducts': 3, 'totalPages': 2, 'currentPage': 1, 'perPage': 2})

		res = self.client.get('/api/admin/products/', {'name': 'che'})
		self.assertEqual([p['name'] for p in res.data['products']], ['Cheap'])
		self.assertEqual(res.data['products'][0]['categoryName'], 'Sarees')

	def test_detail_resolves_related_products(self):
		related = Product.objects.create(name='Matching Blouse', price='300.00', images=['b.jpg'])
		product = Product.objects.create(name='Silk Saree')
		product.related_products.add(related)

		res = self.client.get(f'/api/admin/products/{product.pk}/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['relatedProducts'][0]['name'], 'Matching Blouse')
		self.assertEqual(res.data['relatedProducts'][0]['images'], ['b.jpg'])

	def test_missing_product(self):
		res = self.client.get('/api/admin/products/9999/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Product not found'})

	def test_delete(self):
		product = Product.objects.create(name='Old Stock')
		res = self.client.delete(f'/api/admin/products/{product.pk}/')
		self.assertEqual(res.status_code, 200)
		self.assertFalse(Product.objects.filter(pk=product.pk).exists())

	def test_roles(self):
		anonymous = APIClient().get('/api/admin/products/')
		self.assertEqual(anonymous.status_code, 401)

		customer = APIClient()
		customer.force_authenticate(user=self.customer)
		self.assertEqual(customer.get('/api/admin/products/').status_code, 403)

		marketing = APIClient()
		marketing.force_authenticate(user=_staff(email='mm@example.com', role='marketmanager'))
		self.assertEqual(marketing.get('/api/admin/products/').status_code, 403)


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class PublicCatalogTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.category = Category.objects.create(name='Sarees')
		cls.empty_category = Category.objects.create(name='Dupattas')
		cls.blouse = Product.objects.create(name='Matching Blouse', price='300.00', status='live')
		cls.saree = Product.objects.create(
			name='Red Saree',
			price='1500.00',
			status='live',
			category=cls.category,
			bestseller=True,
		)
		cls.saree.related_products.add(cls.blouse)
		cls.draft = Product.objects.create(name='Draft Saree', category=cls.category)

	def test_product_by_slug_with_related(self):
		res = APIClient().get('/api/products/red-saree/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['name'], 'Red Saree')
		self.assertEqual(res.data['price'], '1500.00')
		self.assertEqual(res.data['relatedProducts'], [{
			'id': self.blouse.pk,
			'name': 'Matching Blouse',
			'slug': 'matching-blouse',
			'images': [],
			'price': '300.00',
		}])

	def test_unknown_slug(self):
		res = APIClient().get('/api/products/no-such-thing/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Product not found'})

	def test_list_shows_live_products_only(self):
		res = APIClient().get('/api/products/')
		self.assertEqual({p['slug'] for p in res.data['products']}, {'red-saree', 'matching-blouse'})
		self.assertEqual(res.data['meta']['totalProducts'], 2)

	def test_slug_lookup_hides_only_offline_products(self):
		res = APIClient().get('/api/products/draft-saree/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['status'], 'draft')

		Product.objects.create(name='Retired Saree', status='offline')
		res = APIClient().get('/api/products/retired-saree/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Product not found'})

	def test_product_created_by_staff_is_readable_by_slug(self):
		staff = APIClient()
		staff.force_authenticate(user=_staff())
		created = staff.post('/api/admin/products/', data={'name': 'Green Lehenga'}, format='json')
		self.assertEqual(created.status_code, 201)

		res = APIClient().get('/api/products/green-lehenga/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['id'], created.data['id'])

	def test_flag_filter(self):
		res = APIClient().get('/api/products/', {'bestseller': 'true'})
		self.assertEqual([p['slug'] for p in res.data['products']], ['red-saree'])
		res = APIClient().get('/api/products/', {'trending': 'true'})
		self.assertEqual(res.data['products'], [])

	def test_category_products_include_every_status(self):
		res = APIClient().get('/api/category/sarees/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['categoryName'], 'Sarees')
		self.assertEqual([p['slug'] for p in res.data['products']], ['draft-saree', 'red-saree'])

	def test_empty_category_is_not_missing(self):
		res = APIClient().get('/api/category/dupattas/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['products'], [])

		missing = APIClient().get('/api/category/nope/')
		self.assertEqual(missing.status_code, 404)
		self.assertEqual(missing.data, {'error': 'Category not found'})


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class HeaderCategoryTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		HeaderCategory.objects.create(name='Festive', order=2)
		HeaderCategory.objects.create(name='Bridal', order=1, images=[{'url': 'a.jpg', 'categoryName': 'Lehenga'}])
		HeaderCategory.objects.create(name='Hidden', is_active=False)

	def test_public_list_is_active_and_ordered(self):
		res = APIClient().get('/api/header-categories/public/')
		self.assertEqual([c['name'] for c in res.data], ['Bridal', 'Festive'])

	def test_lookup_by_slug(self):
		res = APIClient().get('/api/header-category/bridal/')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['category']['images'], [{'url': 'a.jpg', 'categoryName': 'Lehenga'}])

		hidden = APIClient().get('/api/header-category/hidden/')
		self.assertEqual(hidden.status_code, 404)
		self.assertEqual(hidden.data, {'error': 'Header category not found or inactive'})

	def test_admin_create(self):
		client = APIClient()
		client.force_authenticate(user=_staff())
		res = client.post('/api/admin/header-categories/', data={
			'name': 'Party Wear',
			'title': 'Party',
			'images': [{'url': 'p.jpg', 'categoryName': 'Kurti'}],
		}, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['slug'], 'party-wear')
		self.assertEqual(res.data['color'], '#3B82F6')


class CategoryImageUploadTests(TestCase):
	@classmethod
	def setUpClass(cls):
		super().setUpClass()
		cls.media_root = tempfile.mkdtemp()

	@classmethod
	def tearDownClass(cls):
		shutil.rmtree(cls.media_root, ignore_errors=True)
		super().tearDownClass()

	def test_multipart_upload(self):
		buffer = BytesIO()
		Image.new('RGB', (4, 4), 'red').save(buffer, format='PNG')
		upload = SimpleUploadedFile('sarees.png', buffer.getvalue(), content_type='image/png')

		client = APIClient()
		client.force_authenticate(user=_staff())
		with self.settings(MEDIA_ROOT=self.media_root, ALLOWED_HOSTS=['testserver']):
			res = client.post('/api/admin/categories/', data={'name': 'Silk Sarees', 'image': upload, 'isActive': 'true'}, format='multipart')

		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['slug'], 'silk-sarees')
		self.assertTrue(res.data['image'].startswith('http://testserver/media/categories/'))
		self.assertTrue(Category.objects.get(slug='silk-sarees').image.name.startswith('categories/'))


@override_settings(ALLOWED_HOSTS=['testserver', 'localhost', '127.0.0.1'])
class ShowcaseTests(TestCase):
	@classmethod
	def setUpTestData(cls):
		cls.manager = _staff()
		cls.card = {
			'title': 'Banarasi Silk Saree',
			'description': 'Handwoven zari border',
			'category': 'Sarees',
			'images': ['banarasi.jpg'],
			'price': '2499.00',
			'mrp': '4999.00',
			'discount': '50%',
			'ratings': '4.5',
			'variations': [{'color': 'Maroon', 'size': 'Free', 'stock': 4}],
		}

	def setUp(self):
		self.client = APIClient()
		self.client.force_authenticate(user=self.manager)

	def test_create_and_read_by_slug(self):
		res = self.client.post('/api/admin/bestseller/', data=self.card, format='json')
		self.assertEqual(res.status_code, 201)
		self.assertEqual(res.data['slug'], 'banarasi-silk-saree')
		self.assertEqual(ShowcaseItem.objects.get().collection, 'bestseller')

		public = APIClient().get('/api/bestseller/banarasi-silk-saree/')
		self.assertEqual(public.status_code, 200)
		self.assertEqual(public.data['variations'], [{'color': 'Maroon', 'size': 'Free', 'stock': 4}])
		self.assertEqual([c['title'] for c in APIClient().get('/api/bestseller/').data], ['Banarasi Silk Saree'])

	def test_rails_do_not_share_entries(self):
		self.client.post('/api/admin/trending/', data=self.card, format='json')
		self.assertEqual(APIClient().get('/api/bestseller/').data, [])
		self.assertEqual(len(APIClient().get('/api/trending/').data), 1)

		res = APIClient().get('/api/shopbycategory/banarasi-silk-saree/')
		self.assertEqual(res.status_code, 404)
		self.assertEqual(res.data, {'error': 'Product not found'})

	def test_required_fields(self):
		card = dict(self.card)
		del card['mrp']
		res = self.client.post('/api/admin/newarrivals/', data=card, format='json')
		self.assertEqual(res.status_code, 400)
		self.assertTrue(res.data['error'].startswith('mrp:'))

	def test_update_and_delete(self):
		item = ShowcaseItem.objects.create(collection='shopbycategory', **{
			key: value for key, value in self.card.items() if key not in ('variations',)
		})
		res = self.client.patch(f'/api/admin/shopbycategory/{item.pk}/', data={'title': 'Silk Sarees'}, format='json')
		self.assertEqual(res.status_code, 200)
		self.assertEqual(res.data['slug'], 'banarasi-silk-saree')

		res = self.client.delete(f'/api/admin/shopbycategory/{item.pk}/')
		self.assertEqual(res.data, {'message': 'Product deleted successfully'})
		self.assertFalse(ShowcaseItem.objects.exists())

	def test_customers_cannot_manage_rails(self):
		client = APIClient()
		client.force_authenticate(user=_staff(email='shopper@example.com', role='user'))
		self.assertEqual(client.post('/api/admin/bestseller/', data=self.card, format='json').status_code, 403)
