from django.urls import path

from authentication.api.views import SellerAccountCreateView, SellerAccountDetailView


urlpatterns = [
    path("seller/create-account/", SellerAccountCreateView.as_view(), name="seller_create_account"),
    path("seller/me/", SellerAccountDetailView.as_view(), name="seller_detail"),
]
