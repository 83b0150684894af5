from sqladmin import ModelView

from fitzone.contact.models import Inquiry
from fitzone.membership.models import Membership
from fitzone.program.models import Program
from fitzone.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"
    icon = "fa-solid fa-user"

    can_create = False

    column_list = [
        User.email,
        User.first_name,
        User.last_name,
        User.membership_type,
        User.is_active,
        User.join_date,
        User.id,
    ]

    column_searchable_list = [
        User.email,
        User.first_name,
        User.last_name,
    ]

    column_sortable_list = [
        User.email,
        User.last_name,
        User.membership_type,
        User.join_date,
    ]

    # The hash is never shown or editable, even to admins.
    column_details_exclude_list = [User.password_hash]
    form_excluded_columns = [User.password_hash, User.purchases]


class ProgramAdmin(ModelView, model=Program):
    name = "Program"
    name_plural = "Programs"
    icon = "fa-solid fa-dumbbell"

    column_list = [
        Program.id,
        Program.title,
        Program.level,
        Program.duration,
        Program.price,
    ]
    column_searchable_list = [Program.id, Program.title]
    column_sortable_list = [Program.title, Program.price]


class InquiryAdmin(ModelView, model=Inquiry):
    """Triage view: admins read inquiries and move their status along."""

    name = "Inquiry"
    name_plural = "Inquiries"
    icon = "fa-solid fa-envelope"

    can_create = False

    column_list = [
        Inquiry.created_at,
        Inquiry.status,
        Inquiry.type,
        Inquiry.name,
        Inquiry.email,
    ]
    column_searchable_list = [Inquiry.name, Inquiry.email, Inquiry.message]
    column_sortable_list = [Inquiry.created_at, Inquiry.status, Inquiry.type]
    column_default_sort = [(Inquiry.created_at, True)]

    form_columns = [Inquiry.status]


class MembershipAdmin(ModelView, model=Membership):
    name = "Membership"
    name_plural = "Memberships"
    icon = "fa-solid fa-id-card"

    can_create = False

    column_list = [
        Membership.user_id,
        Membership.plan_type,
        Membership.start_date,
        Membership.end_date,
        Membership.payment_status,
        Membership.amount,
    ]
    column_sortable_list = [Membership.start_date, Membership.plan_type]


ADMIN_VIEWS = [UserAdmin, ProgramAdmin, InquiryAdmin, MembershipAdmin]
