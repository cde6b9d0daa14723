#!/usr/bin/env python
"""Create an employee from the command line."""

import argparse
import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.domain.employee import Employee
from employee_api.repositories.employee_repository import EmployeeRepository


async def create_employee(session: AsyncSession, employee: Employee) -> Employee:
    """Store a new employee.

    Returns:
        The stored employee with its assigned id
    """
    return await EmployeeRepository(session).save(employee)


async def main(args: argparse.Namespace) -> None:
    from employee_api.database import engine, session_scope

    employee = Employee(
        firstname=args.firstname,
        lastname=args.lastname,
        email=args.email,
        address=args.address,
        phone=args.phone,
    )
    async with session_scope() as session:
        stored = await create_employee(session, employee)
    await engine.dispose()
    print(f"Employee created: {stored}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create an employee")
    parser.add_argument("--firstname", help="First name")
    parser.add_argument("--lastname", help="Last name")
    parser.add_argument("--email", help="Email address")
    parser.add_argument("--address", help="Postal address")
    parser.add_argument("--phone", help="Phone number")

    asyncio.run(main(parser.parse_args()))
