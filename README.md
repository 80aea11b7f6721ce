# showtimes

The business rules behind an online watch shop, with no web framework attached.
Each use case is a plain class. You build it with its repositories, and sometimes a
helper or a config object. It checks its input, calls those collaborators and returns
dataclasses from `showtimes.models`. When a rule is broken it raises
`showtimes.errors.UseCaseError`. The collaborators can be any objects that have the
methods a use case calls. Each class's docstring lists those methods.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in it

- `showtimes.errors`: `UseCaseError` and the shared message strings, such as
  `ERR_OUT_OF_STOCK`, `ERR_LIMIT_EXCEEDS` and `ERR_ALREADY_PAID`.
- `showtimes.models`: dataclasses for carts, orders, products, offers, users,
  payments, wallets and dashboard figures.
- `showtimes.response`: `Response` and `client_response(status_code, message, data,
  error)`. They build the envelope an API sends back. `Response.to_dict()` returns
  `status_code`, `message`, `data` and `error` as plain values, with dataclasses turned
  into dicts and exceptions into their messages.
- `showtimes.pdf`: `PdfDocument` is a small A4 PDF writer built from text cells, using
  core Helvetica or Courier fonts. Its methods are `add_page`, `set_font`,
  `set_text_color`, `set_fill_color`, `cell` and `ln`. `output()` returns the document
  as bytes.
- Use cases:
  - `showtimes.admin.AdminUseCase`: bcrypt-checked login, blocking and unblocking
    users, the dashboard, sales reports by period, by date range or by
    day/month/year, and a PDF sales report.
  - `showtimes.category.CategoryUseCase`: add, list, rename and delete categories.
  - `showtimes.offer.OfferUseCase`: add, list and expire product and category offers.
  - `showtimes.wallet.WalletUseCase`: fetch a wallet, creating it first if it does
    not exist.
  - `showtimes.cart.CartUseCase`: add to the cart, list it, change quantities and
    remove items. A product can have at most 20 units in a cart.
  - `showtimes.products.ProductUseCase`: add, list, edit, delete and restock products.
  - `showtimes.otp.OtpUseCase`: send and verify one-time codes through the helper.
  - `showtimes.payment.PaymentUseCase`: payment methods, and opening a gateway order
    through an `order_gateway` callable you supply.
  - `showtimes.order.OrderUseCase`: checkout, place, cancel, approve and return
    orders, and print invoices as PDFs.

## Example

```python
from showtimes.category import CategoryUseCase
from showtimes.errors import UseCaseError
from showtimes.models import Category

use_case = CategoryUseCase(category_repository)
try:
    created = use_case.add_category(Category(category="Chronograph"))
except UseCaseError as exc:
    print(exc)  # e.g. "category already exist"
```

To write a year's sales report to a PDF file:

```python
from showtimes.admin import AdminUseCase

admin = AdminUseCase(admin_repository, helper)
sales = admin.sales_by_date(0, 0, 2024)
pdf = admin.print_sales_report(sales)
with open("sales.pdf", "wb") as fh:
    fh.write(pdf.output())
```

## What it does not do

The package only holds the rules. It has no database or other storage, no HTTP
server and no command-line program. It does not generate tokens, send SMS, upload
images or talk to a payment gateway on its own. All of these come from the
repositories, helpers and gateway callables you pass in.