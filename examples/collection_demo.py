"""Example usage of the document mapper with MongoDB."""

import asyncio
from typing import List

from document_mapper import Collection, Connection, Document, ParsingError, ValidationError
from document_mapper.sanitizers import hash_value, to_lowercase, trim
from document_mapper.validators import IsNotNull, Matches, MinLength, Range


async def print_separator(title: str = "") -> None:
    """Print a separator line with optional title."""
    print("\n" + "=" * 80)
    if title:
        print(title)
        print("-" * 80)


async def print_documents(documents: List[Document]) -> None:
    """Print documents in a tabular format."""
    if not documents:
        print("No documents found")
        return

    rows = [document.to_json() for document in documents]
    fields = sorted({key for row in rows for key in row})

    print("| " + " | ".join(fields) + " |")
    print("|" + "|".join("-" * (len(field) + 2) for field in fields) + "|")
    for row in rows:
        print("| " + " | ".join(str(row.get(field, "")) for field in fields) + " |")


async def main() -> None:
    """Run the demo."""
    connection = Connection.from_settings()

    employees = Collection(
        "employees",
        connection,
        {
            "name": {"type": "string", "validations": {"present": IsNotNull(), "length": MinLength(2)}, "sanitizers": [trim]},
            "email": {"type": "string", "validations": {"email": Matches(r"[^@\s]+@[^@\s]+\.[a-z]+")}, "sanitizers": [trim, to_lowercase]},
            "age": {"type": "integer", "validations": {"range": Range(16, 99)}},
            "salary": {"type": "float", "defaultValue": 0.0},
            "started": {"type": "date", "formats": ["%Y-%m-%d"]},
            "pin": {"type": "string", "hidden": True, "sanitizers": [hash_value("sha256", "demo-salt")]},
            "address.city": {"type": "string", "defaultValue": "Unknown"},
        },
        indexes=[{"name": "by_email", "keys": "email", "options": {"unique": True}}],
        virtuals={"display_name": lambda doc: f"{doc['name']} <{doc['email']}>"},
    )

    try:
        await employees.ensure_indexes()

        # Clean up documents from previous runs
        for document in await employees.list({"email": {"$regex": "@example.com$"}}):
            await employees.delete_by_id(document.id)

        await print_separator("Creating Documents")
        for data in [
            {"name": " John Doe ", "email": "John@Example.com", "age": "30", "salary": "75000", "started": "2019-03-01", "pin": "1234"},
            {"name": "Jane Smith", "email": "jane@example.com", "age": 35, "started": "2017-06-15", "pin": "9876", "address": {"city": "Oslo"}},
        ]:
            document = await employees.create(data)
            print(f"Created document with ID: {document.id}")

        await print_separator("All Documents")
        await print_documents(await employees.list(sort={"name": 1}))
        print(f"Count: {await employees.count()}")

        await print_separator("Patching Document")
        jane = await employees.get({"email": "jane@example.com"})
        patched = await employees.patch_by_id(jane.id, {"salary": "90000", "address": {"zip": "0150"}})
        print(f"Jane's new salary: ${patched['salary']:,.2f} in {patched['address']}")

        await print_separator("Saving Document")
        patched["age"] = 36
        await patched.save()
        await patched.refresh()
        print(f"Jane is now {patched['age']}")

        await print_separator("Invalid Data Demo")
        try:
            await employees.create({"name": "Kid", "email": "kid@example.com", "age": 12})
        except ValidationError as e:
            print(f"Validation error: {e}")
        try:
            await employees.create({"name": "Someone", "email": "someone@example.com", "age": "old"})
        except ParsingError as e:
            print(f"Parsing error: {e}")

        await print_separator("Deleting Document")
        deleted = await employees.delete_by_id(jane.id)
        print(f"Deleted {deleted['name']}; still there: {await employees.get_by_id(jane.id) is not None}")

    finally:
        await connection.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
