import sqlalchemy

from pricingdb.models.public.payment_method import PaymentMethodTable

public = sqlalchemy.MetaData(schema="public")

# reference instance of public.payment_method
payment_method = PaymentMethodTable(db_metadata=public)

# keys and indexes, named the way the database reports them
identity_payment_method = payment_method.identity
constraint_d = payment_method.primary_key
primary_key_d = payment_method.indexes[0]
