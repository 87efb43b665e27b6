"""
Django Admin configuration for ShareIt.
"""

from django.contrib import admin

from shareit.models import Booking, Comment, Item, ItemRequest, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["id", "email", "name"]
    search_fields = ["email", "name"]


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "owner", "available"]
    search_fields = ["name", "description"]
    list_filter = ["available"]


@admin.register(ItemRequest)
class ItemRequestAdmin(admin.ModelAdmin):
    list_display = ["id", "requester", "created"]
    search_fields = ["description"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["id", "item", "booker", "start", "end", "status"]
    list_filter = ["status"]
    readonly_fields = ["item", "booker", "start", "end", "status"]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["id", "item", "author", "created"]
    search_fields = ["text"]
