import random
import uuid
from decimal import Decimal

import factory
from django.contrib.auth import get_user_model

from authentication.models import Seller
from marketplace.models import Category, Product, ProductCategory, ProductTag, ProductVariant, Store, Tag
from utils.identifiers import unique_slug, variant_sku

User = get_user_model()


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User
        skip_postgeneration_save = True

    id = factory.LazyFunction(uuid.uuid4)
    username = factory.Sequence(lambda n: f"user_{n}")
    email = factory.Sequence(lambda n: f"user_{n}@example.com")
    is_active = True
    role = "buyer"

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        self.set_password(extracted or "defaultpassword")
        if create:
            self.save(update_fields=["password"])


class SellerUserFactory(UserFactory):
    role = "seller"
    username = factory.Sequence(lambda n: f"seller_{n}")
    email = factory.Sequence(lambda n: f"seller_{n}@example.com")


class AdminFactory(UserFactory):
    role = "admin"
    is_superuser = True
    is_staff = True
    username = factory.Sequence(lambda n: f"admin_{n}")
    email = factory.Sequence(lambda n: f"admin_{n}@example.com")


class SellerFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Seller

    user = factory.SubFactory(SellerUserFactory)
    business_name = factory.Faker("company")
    phone_number = factory.Sequence(lambda n: f"55500{n:05d}")
    agreed_to_terms = True


class StoreFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Store

    seller = factory.SubFactory(SellerFactory)
    store_name = factory.Sequence(lambda n: f"Store {n}")
    store_description = factory.Faker("sentence", nb_words=8)
    slug = factory.LazyAttribute(lambda o: unique_slug(o.store_name))
    is_active = True


class CategoryFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Category

    name = factory.Sequence(lambda n: f"Cat {n}")
    slug = factory.LazyAttribute(lambda o: unique_slug(o.name))


class TagFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Tag

    name = factory.Sequence(lambda n: f"tag{n}")
    description = factory.Faker("sentence", nb_words=6)


class ProductFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Product
        skip_postgeneration_save = True

    id = factory.LazyFunction(uuid.uuid4)
    store = factory.SubFactory(StoreFactory)
    name = factory.Sequence(lambda n: f"Product {n}")
    description = factory.Faker("sentence", nb_words=10)
    status = "active"

    @factory.post_generation
    def categories(self, create, extracted, **kwargs):
        if create and extracted:
            for category in extracted:
                ProductCategory.objects.create(product=self, category=category)

    @factory.post_generation
    def tags(self, create, extracted, **kwargs):
        if create and extracted:
            for tag in extracted:
                ProductTag.objects.create(product=self, tag=tag)


class VariantFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ProductVariant

    product = factory.SubFactory(ProductFactory)
    name = factory.Sequence(lambda n: f"Variant {n}")
    color = factory.Iterator(["#000000", "#FFFFFF", "#228B22", "#DC143C"])
    size = factory.Iterator(["xs", "s", "m", "l", "xl", "xxl"])
    sku = factory.LazyAttribute(lambda o: variant_sku(o.name, o.size, o.color))
    price = factory.LazyFunction(lambda: Decimal(f"{random.randint(5, 200)}.99"))
    quantity = factory.Faker("random_int", min=0, max=50)


def product_submission(store, **overrides):
    """A valid nested product submission for ``store``, as a client would send it."""
    data = {
        "name": "Linen Shirt",
        "description": "Breathable linen shirt for warm days",
        "status": "active",
        "store_id": str(store.id),
        "variants": [
            {"name": "Red M", "color": "#DC143C", "size": "m", "price": "19.99", "quantity": 5},
            {"name": "Black L", "color": "#000000", "size": "l", "price": "21.50", "quantity": 0},
        ],
        "categories": [{"name": "Shirts"}, {"name": "Summer"}],
        "tags": [{"name": "linen", "description": "Made from linen"}],
    }
    data.update(overrides)
    return data
