from django.contrib import admin
from django.urls import path

# El storefront (render de landings y fichas) vive fuera de este proyecto;
# acá solo queda el admin que edita el store de locales.
urlpatterns = [
    path("admin/", admin.site.urls),
]

handler404 = "django.views.defaults.page_not_found"
handler500 = "django.views.defaults.server_error"
