from django.urls import path

from djangoredsys.views import soap_notification

urlpatterns = [
    path("notification/", soap_notification, name="redsys_soap_notification"),
]
