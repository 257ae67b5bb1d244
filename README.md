# customerapi

A small HTTP API for managing customers. Customers are stored in a SQL
database through SQLAlchemy, and two endpoints are served under `/api`:

| Method | Path              | Purpose                                   |
|--------|-------------------|-------------------------------------------|
| POST   | `/api/customers`  | Create a customer                         |
| GET    | `/api/customers`  | List customers, one page at a time        |

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
customerapi
```

The command connects to the database, creates the `customers` table if
it does not exist, and serves the API with Flask's built-in server until
it is interrupted (Ctrl+C). The engine is disposed of on the way out.

Settings come from command-line options, each falling back to an
environment variable and then to a default:

| Option           | Environment variable | Default     |
|------------------|----------------------|-------------|
| `--host`         | `APP_HOST`           | `localhost` |
| `--port`         | `APP_PORT`           | `8080`      |
| `--timeout`      | `APP_TIMEOUT_SEC`    | `10`        |
| `--db-host`      | `DB_HOST`            | `localhost` |
| `--db-port`      | `DB_PORT`            | `5432`      |
| `--db-name`      | `DB_NAME`            | (empty)     |
| `--db-user`      | `DB_USER`            | (empty)     |
| `--db-sslmode`   | `DB_SSLMODE`         | `disable`   |
| `--database-url` | `DATABASE_URL`       | (none)      |

The database password is read only from `DB_PASSWORD`. `APP_NAME` and
`APP_ENV` are read into the configuration as well.

Without `--database-url` the `--db-*` settings are combined into a
PostgreSQL URL. SQLAlchemy then needs a PostgreSQL driver (psycopg2 by
default), which this package does not install. Any SQLAlchemy URL can be
given instead, for example:

```
customerapi --database-url sqlite:///customers.db
```

## Creating a customer

`POST /api/customers` takes a JSON body with three required string
fields:

```json
{
  "first_name": "John",
  "last_name": "Doe",
  "phone": "[phone]"
}
```

On success the reply is `201 Created` with the stored customer, now
carrying its `id`:

```json
{"id": 1, "first_name": "John", "last_name": "Doe", "phone": "[phone]"}
```

A body that is not a JSON object, or a field of the wrong type, gives
`400` with `{"message": "invalid request body"}`. Form-encoded bodies are
accepted too; other content types are refused the same way. A required
field that is missing or empty gives `400` with
`"message": "validation failed"` and a `details` object mapping each such
field to `"required"`:

```json
{"message": "validation failed", "details": {"phone": "required"}}
```

## Listing customers

`GET /api/customers?page=1&limit=10` returns one page, ordered by `id`
and leaving out rows whose `deleted_at` is set:

```json
{
  "data": [{"id": 1, "first_name": "John", "last_name": "Doe", "phone": "[phone]"}],
  "total": 1,
  "page": 1,
  "limit": 10,
  "total_pages": 1
}
```

`page` and `limit` are optional. A missing, non-numeric, zero or negative
`page` becomes `1`; the same for `limit` becomes `10`. `total_pages` is
the total divided by the limit, rounded up.

## Errors

Every error reply is JSON with a `message` field, and sometimes a
`details` object. HTTP errors raised by Flask (such as `404` or `405`)
keep their status. Any other unexpected exception is logged and answered
with `500` and `{"message": "internal server error"}`.

## Using it as a library

The pieces can be assembled in code:

```python
from customerapi.repository import connect
from customerapi.container import build_container
from customerapi.server import create_app

engine = connect("sqlite:///customers.db")
app = create_app(build_container(engine))
```

`app` is an ordinary Flask (WSGI) application and can be served by any
WSGI server.

- `customerapi.pagination` holds `Params` (with `normalize()` and
  `calculate_offset()`), `Pagination` (with `set_total_pages()` and
  `to_dict()`) and `copy_metadata()`.
- `customerapi.domain` holds the `Customer` entity, `new_customer()` and
  the abstract `CustomerRepository` with `save()` and `list()`.
- `customerapi.dto` holds `CreateCustomerInput`, `CustomerDTO` and
  `from_entity()`.
- `customerapi.httphelper` holds `ErrorResponse` and
  `bind_and_validate()`, which binds a JSON body to a dataclass and checks
  its required fields.
- `customerapi.usecases` holds `CreateCustomerUseCase` and
  `ListCustomersUseCase`; they work with any `CustomerRepository`.
- `customerapi.repository` holds the SQLAlchemy `CustomerModel`,
  `SqlCustomerRepository`, `connect()`, `close()` and `build_dsn()`.
- `customerapi.errorhandler.handle_error()` turns an exception into a
  JSON body and status code.

## What it does not do

- It serves no OpenAPI or Swagger documentation.
- It has no schema migrations: `connect()` only creates missing tables.
- It reads no configuration file; settings come from options and
  environment variables only.
- `--timeout` is stored in the configuration but not applied by the
  built-in server, which is Flask's development server; use a WSGI
  server for production.