"""Entity forms: client-side validated input models producing request bodies.

Use explicit imports:
    from customer_admin.forms.base import validate_form, UsernameInput
    from customer_admin.forms.customer import CustomerForm
"""
