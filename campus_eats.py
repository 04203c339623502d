#!/usr/bin/env python3.13

#                                              _
#   ___ __ _ _ __ ___  _ __  _   _ ___    ___| |_ ___
#  / __/ _` | '_ ` _ \| '_ \| | | / __|  / _ \ __/ __|
# | (_| (_| | | | | | | |_) | |_| \__ \ |  __/ |_\__ \
#  \___\__,_|_| |_| |_| .__/ \__,_|___/  \___|\__|___/ 🍱
#                     |_|
#
# campus food-ordering admin console: menus for restaurant managers,
# accounts for students and managers
# --sql is used for syntax highlighting inline sql queries

import os
import sqlite3
import signal
import sys
import atexit
import inspect
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterator
from enum import Enum

from termcolor import cprint, colored
from colorama import just_fix_windows_console as enable_windows_ansi_interpretation

# fix windows terminal misinterpreting ansi escape sequences
enable_windows_ansi_interpretation()

# constants
DB_PATH = os.environ.get("CAMPUS_EATS_DB", "campus-eats.db")
SCHEMA_VERSION = 1
MENU_TABLE_RULE = "-" * 32
SEARCH_ROW_RULE = "-" * 28
USER_TABLE_RULE = "-" * 79
SKIP_HINT = "(Press enter to skip)"

SEED_RESTAURANTS = [
    (1, "Student Union Cafeteria", "Student Union B1"),
    (2, "Engineering Hall Snack Bar", "Engineering Hall 1F"),
    (3, "Dormitory Dining Hall", "Dormitory A, 1F"),
]
SEED_MENU = [
    (1, 1, "Kimchi Fried Rice", 5500),
    (1, 2, "Tteokbokki", 4500),
    (2, 1, "Tuna Gimbap", 3500),
]

# helpers
def safe_int(value: str | None, minimum: int | None = None):
    """return int value or none if invalid / below minimum

    plain ascii digits with an optional sign only; int() would also take "1_000"
    """
    if value is None:
        return None
    text = value.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    v = int(text)
    if minimum is not None and v < minimum:
        return None
    return v

def like_pattern(text: str) -> str:
    """escape LIKE wildcards so user text matches literally (pair with ESCAPE '\\')"""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

def ask_int(value: str | None, prompt: str, minimum: int | None = None) -> int | None:
    """read an int from the console unless already given; none (reported) if invalid"""
    if value is None:
        value = input(prompt).strip()
    number = safe_int(value, minimum)
    if number is None:
        cprint(f"invalid number: {value!r}", "red")
    return number

def ask_text(value: str | None, prompt: str) -> str:
    """read a stripped line unless already given"""
    if value is None:
        value = input(prompt)
    return value.strip()

def parse_boolean_input(prompt: str, handle_invalid: bool = False) -> bool:
    """parse y/n style input; optionally warn on invalid"""
    p = prompt.lower().strip()
    if p in ("y", "yes"):
        return True
    if p in ("n", "no"):
        return False
    if handle_invalid:
        cprint("invalid input, please try again.", "red")
    return False

# results
class Outcome(Enum):
    """result of a single insert / update / delete"""
    SUCCESS = "success"
    NOT_FOUND = "not found"
    CONSTRAINT_VIOLATION = "constraint violation"
    FAILED = "failed"

    @property
    def ok(self) -> bool:
        return self is Outcome.SUCCESS

@dataclass
class RowSet:
    """rows from a read query, or the database error that stopped it"""
    rows: list = field(default_factory=list)
    error: sqlite3.Error | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def map(self, fn: Callable) -> "RowSet":
        return RowSet([fn(r) for r in self.rows], self.error)

    def __iter__(self) -> Iterator:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

# domain models
@dataclass
class Menu:
    """menu row; identity is (restaurant_id, menu_id)"""
    menu_id: int
    name: str
    restaurant_id: int
    price: int

@dataclass
class MenuUpdate:
    """partial menu change, a field left as none is not touched"""
    name: str | None = None
    price: int | None = None

    @property
    def has_changes(self) -> bool:
        return self.name is not None or self.price is not None

@dataclass
class User:
    """account row (plain text password, it's what the course db stores)"""
    user_id: str
    password: str
    name: str
    student_id: int
    email: str
    location: str

@dataclass(frozen=True)
class UserView:
    """what other users get to see about an account"""
    user_id: str
    name: str

class Role(Enum):
    """which console the operator is using"""
    USER = 0
    MANAGER = 1

@dataclass
class Session:
    """caller-owned login state, handed to every account operation"""
    user: User | None = None
    role: Role = Role.USER

    @property
    def logged_in(self) -> bool:
        return self.user is not None

# database layer
class DatabaseManager:
    """manage sqlite connection and schema"""
    def __init__(self, path: str = DB_PATH):
        self.path = path
        self.conn = sqlite3.connect(path)
        self.conn.row_factory = sqlite3.Row
        self.conn.autocommit = True
        self.conn.execute("--sql\nPRAGMA foreign_keys=ON;")
        self._create_schema()
        self._seed()

    def _create_schema(self):
        """create tables / view if missing"""
        self.conn.executescript(
            """--sql
            CREATE TABLE IF NOT EXISTS restaurant (
                res_id INTEGER PRIMARY KEY,
                res_name TEXT NOT NULL UNIQUE,
                location TEXT
            );
            CREATE TABLE IF NOT EXISTS menu (
                menu_id INTEGER NOT NULL,
                menu_name TEXT NOT NULL,
                res_id INTEGER NOT NULL,
                price INTEGER NOT NULL CHECK (price >= 0),
                PRIMARY KEY (res_id, menu_id),
                FOREIGN KEY(res_id) REFERENCES restaurant(res_id) ON DELETE CASCADE
            );
            CREATE TABLE IF NOT EXISTS users (
                user_id TEXT PRIMARY KEY,
                user_pw TEXT NOT NULL, -- plain text, same as the course db
                name TEXT NOT NULL,
                student_id INTEGER NOT NULL,
                email TEXT,
                location TEXT
            );
            CREATE VIEW IF NOT EXISTS user_view AS
            SELECT user_id, name FROM users;
            """
        )

    def _seed(self):
        """seed campus restaurants and a starter menu once per database file"""
        version = self.conn.execute("PRAGMA user_version;").fetchone()[0]
        if version >= SCHEMA_VERSION:
            return
        self.conn.executemany(
            """--sql
            INSERT OR IGNORE INTO restaurant(res_id, res_name, location) VALUES(?, ?, ?);
            """,
            SEED_RESTAURANTS
        )
        self.conn.executemany(
            """--sql
            INSERT OR IGNORE INTO menu(res_id, menu_id, menu_name, price) VALUES(?, ?, ?, ?);
            """,
            SEED_MENU
        )
        self.conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION};")

    def write(self, sql: str, params: tuple = ()) -> Outcome:
        """run one insert / update / delete and classify the result"""
        try:
            cur = self.conn.execute(sql, params)
        except sqlite3.IntegrityError:
            return Outcome.CONSTRAINT_VIOLATION
        except sqlite3.Error:
            return Outcome.FAILED
        return Outcome.SUCCESS if cur.rowcount > 0 else Outcome.NOT_FOUND

    def fetch(self, sql: str, params: tuple = ()) -> RowSet:
        """run a select; a failure comes back on the rowset instead of raising"""
        try:
            return RowSet(self.conn.execute(sql, params).fetchall())
        except sqlite3.Error as e:
            return RowSet([], e)

    def fetch_one(self, sql: str, params: tuple = ()):
        """run a select expected to match at most one row; a failure is reported and reads as none"""
        try:
            return self.conn.execute(sql, params).fetchone()
        except sqlite3.Error as e:
            cprint(f"query failed: {e}", "red")
            return None

    def close(self):
        self.conn.close()

class MenuDAO:
    """menu table access; every query is keyed by restaurant"""
    def __init__(self, db: DatabaseManager):
        self.db = db

    def add(self, menu: Menu) -> Outcome:
        return self.db.write(
            "INSERT INTO menu(menu_id, menu_name, res_id, price) VALUES(?,?,?,?);",
            (menu.menu_id, menu.name, menu.restaurant_id, menu.price)
        )

    def update(self, change: MenuUpdate, restaurant_id: int, menu_id: int) -> Outcome:
        """apply only the fields set on change"""
        updates = {}
        if change.name is not None:
            updates["menu_name"] = change.name
        if change.price is not None:
            updates["price"] = change.price
        if not updates:
            return Outcome.SUCCESS if self.get_menu(restaurant_id, menu_id) else Outcome.NOT_FOUND
        set_clause = ", ".join(f"{k}=?" for k in updates)
        return self.db.write(
            f"UPDATE menu SET {set_clause} WHERE res_id=? AND menu_id=?;",
            (*updates.values(), restaurant_id, menu_id)
        )

    def delete(self, restaurant_id: int, menu_id: int) -> Outcome:
        return self.db.write(
            "DELETE FROM menu WHERE res_id=? AND menu_id=?;",
            (restaurant_id, menu_id)
        )

    def get_menu(self, restaurant_id: int, menu_id: int) -> Menu | None:
        row = self.db.fetch_one(
            "SELECT menu_id, menu_name, res_id, price FROM menu WHERE res_id=? AND menu_id=?;",
            (restaurant_id, menu_id)
        )
        if row is None:
            return None
        return Menu(row["menu_id"], row["menu_name"], row["res_id"], row["price"])

    def get_all_menu_by_restaurant(self, restaurant_id: int) -> RowSet:
        return self.db.fetch(
            "SELECT menu_id, menu_name FROM menu WHERE res_id=? ORDER BY menu_id;",
            (restaurant_id,)
        )

    def search_by_users(self, restaurant_name: str | None = None, menu_name: str | None = None,
                        min_price: int | None = None, max_price: int | None = None) -> RowSet:
        """filtered search across restaurants; none filters are ignored"""
        clauses, params = [], []
        if restaurant_name is not None:
            clauses.append("r.res_name LIKE '%' || ? || '%' ESCAPE '\\'")
            params.append(like_pattern(restaurant_name))
        if menu_name is not None:
            clauses.append("m.menu_name LIKE '%' || ? || '%' ESCAPE '\\'")
            params.append(like_pattern(menu_name))
        if min_price is not None:
            clauses.append("m.price >= ?")
            params.append(min_price)
        if max_price is not None:
            clauses.append("m.price <= ?")
            params.append(max_price)
        where = " AND ".join(clauses) or "1=1"
        return self.db.fetch(
            f"""--sql
            SELECT r.res_name, m.menu_name, m.price
            FROM menu m
            JOIN restaurant r ON r.res_id = m.res_id
            WHERE {where}
            ORDER BY m.res_id, m.menu_id;
            """,
            tuple(params)
        )

    def search_menu_by_restaurant(self, restaurant_id: int) -> RowSet:
        return self.db.fetch(
            "SELECT menu_id, menu_name, price FROM menu WHERE res_id=? ORDER BY menu_id;",
            (restaurant_id,)
        )

    def search_by_manager(self, restaurant_id: int) -> RowSet:
        return self.db.fetch(
            "SELECT menu_id, res_id, menu_name, price FROM menu WHERE res_id=? ORDER BY menu_id;",
            (restaurant_id,)
        )

class UserDAO:
    """users table + user_view access"""
    def __init__(self, db: DatabaseManager):
        self.db = db

    @staticmethod
    def _to_user(row: sqlite3.Row) -> User:
        return User(row["user_id"], row["user_pw"], row["name"],
                    row["student_id"], row["email"], row["location"])

    def sign_in(self, user_id: str, password: str) -> bool:
        """plain text credential check"""
        return self.db.fetch_one(
            "SELECT 1 FROM users WHERE user_id=? AND user_pw=? LIMIT 1;",
            (user_id, password)
        ) is not None

    def add(self, user: User) -> Outcome:
        return self.db.write(
            """--sql
            INSERT INTO users(user_id, user_pw, name, student_id, email, location)
            VALUES(?,?,?,?,?,?);
            """,
            (user.user_id, user.password, user.name, user.student_id, user.email, user.location)
        )

    def get_user(self, user_id: str) -> User | None:
        row = self.db.fetch_one(
            "SELECT user_id, user_pw, name, student_id, email, location FROM users WHERE user_id=?;",
            (user_id,)
        )
        return self._to_user(row) if row else None

    def get_other_user(self, user_id: str) -> UserView | None:
        row = self.db.fetch_one(
            "SELECT user_id, name FROM user_view WHERE user_id=?;",
            (user_id,)
        )
        return UserView(row["user_id"], row["name"]) if row else None

    def get_all_users(self) -> RowSet:
        return self.db.fetch(
            "SELECT user_id, user_pw, name, student_id, email, location FROM users ORDER BY user_id;"
        ).map(self._to_user)

    def update(self, user: User, current_user_id: str) -> Outcome:
        """overwrite every column of current_user_id (the id itself may change)"""
        return self.db.write(
            """--sql
            UPDATE users
            SET user_id=?, user_pw=?, name=?, student_id=?, email=?, location=?
            WHERE user_id=?;
            """,
            (user.user_id, user.password, user.name, user.student_id,
             user.email, user.location, current_user_id)
        )

    def delete(self, user_id: str, password: str) -> Outcome:
        """delete only when the password matches; mismatch reads as not found"""
        return self.db.write(
            "DELETE FROM users WHERE user_id=? AND user_pw=?;",
            (user_id, password)
        )

# menu management
class MenuManager:
    """menu workflows: read console input, call the dao, print the result"""
    def __init__(self, menu_dao: MenuDAO):
        self.dao = menu_dao

    @staticmethod
    def _report_fetch_error(rows: RowSet):
        """a failed row fetch is reported after whatever was printed"""
        if rows.error is not None:
            cprint(f"query failed: {rows.error}", "red")

    def add_menu(self, menu_id: str | None = None, name: str | None = None,
                 restaurant_id: str | None = None, price: str | None = None):
        """add a menu item to a restaurant"""
        mid = ask_int(menu_id, "Enter Menu ID: ", minimum=0)
        if mid is None:
            return
        name = ask_text(name, "Enter Menu Name: ")
        if not name:
            cprint("menu name required", "red"); return
        rid = ask_int(restaurant_id, "Enter Restaurant ID: ", minimum=0)
        if rid is None:
            return
        p = ask_int(price, "Enter Price: ", minimum=0)
        if p is None:
            return
        outcome = self.dao.add(Menu(mid, name, rid, p))
        if outcome.ok:
            cprint("Menu added successfully.", "green")
        else:
            cprint("Error adding menu.", "red")
        return outcome

    def update_menu(self, restaurant_id: str | None = None, menu_id: str | None = None,
                    new_name: str | None = None, new_price: str | None = None):
        """show the restaurant's menu, then change name and/or price of one item"""
        rid = ask_int(restaurant_id, "Enter Restaurant ID: ", minimum=0)
        if rid is None:
            return
        self.display_all_menu(rid)
        mid = ask_int(menu_id, "Enter Menu ID: ", minimum=0)
        if mid is None:
            return
        new_name = ask_text(new_name, f"Enter New Menu Name {SKIP_HINT}: ")
        new_price = ask_text(new_price, f"Enter New Price {SKIP_HINT}: ")
        price = None
        if new_price:
            price = safe_int(new_price, minimum=0)
            if price is None:
                cprint("invalid price, must be a whole number >= 0", "red"); return
        change = MenuUpdate(name=new_name or None, price=price)
        if not change.has_changes:
            cprint("no changes made", "yellow"); return
        outcome = self.dao.update(change, rid, mid)
        if outcome.ok:
            cprint("Menu updated successfully.", "green")
        else:
            cprint("Error updating menu.", "red")
        return outcome

    def delete_menu(self, restaurant_id: str | None = None, menu_id: str | None = None):
        """show the restaurant's menu, then delete one item"""
        rid = ask_int(restaurant_id, "Enter Restaurant ID: ", minimum=0)
        if rid is None:
            return
        self.display_all_menu(rid)
        mid = ask_int(menu_id, "Enter Menu ID: ", minimum=0)
        if mid is None:
            return
        outcome = self.dao.delete(rid, mid)
        if outcome.ok:
            cprint("Menu deleted successfully.", "green")
        else:
            cprint("Error deleting menu.", "red")
        return outcome

    def search_by_users(self, restaurant_name: str | None = None, menu_name: str | None = None,
                        min_price: str | None = None, max_price: str | None = None):
        """search menus by restaurant name, menu name and price range; blank skips a filter"""
        restaurant_name = ask_text(restaurant_name, "Enter Restaurant Name (or press Enter to skip): ") or None
        menu_name = ask_text(menu_name, "Enter Menu Name (or press Enter to skip): ") or None

        raw_min = ask_text(min_price, "Enter Minimum Price (or press Enter to skip): ")
        low = None
        if raw_min:
            low = safe_int(raw_min)
            if low is None:
                cprint("Invalid minimum price input. Please enter a valid number or press Enter to skip.", "red")
                return
        raw_max = ask_text(max_price, "Enter Maximum Price (or press Enter to skip): ")
        high = None
        if raw_max:
            high = safe_int(raw_max)
            if high is None:
                cprint("Invalid maximum price input. Please enter a valid number or press Enter to skip.", "red")
                return

        rows = self.dao.search_by_users(restaurant_name, menu_name, low, high)
        for row in rows:
            print(f"Restaurant Name: {row['res_name']}")
            print(f"Menu Name: {row['menu_name']}")
            print(f"Price: {row['price']}")
            print(SEARCH_ROW_RULE)
        if rows.ok and not rows:
            cprint("no menus matched", "yellow")
        self._report_fetch_error(rows)
        return rows

    def search_menu_by_restaurant(self, restaurant_id: str | None = None):
        """list one restaurant's menu with prices"""
        rid = ask_int(restaurant_id, "Enter Restaurant ID: ", minimum=0)
        if rid is None:
            return
        rows = self.dao.search_menu_by_restaurant(rid)
        for row in rows:
            print(f"Menu ID: {row['menu_id']}")
            print(f"Menu Name: {row['menu_name']}")
            print(f"Price: {row['price']}")
            print(SEARCH_ROW_RULE)
        self._report_fetch_error(rows)
        return rows

    def search_by_manager(self, restaurant_id: str | None = None):
        """manager listing, includes the restaurant id column"""
        rid = ask_int(restaurant_id, "Enter Restaurant ID: ", minimum=0)
        if rid is None:
            return
        rows = self.dao.search_by_manager(rid)
        for row in rows:
            print(f"Menu ID: {row['menu_id']}")
            print(f"Restaurant ID: {row['res_id']}")
            print(f"Menu Name: {row['menu_name']}")
            print(f"Price: {row['price']}")
            print(SEARCH_ROW_RULE)
        self._report_fetch_error(rows)
        return rows

    def display_all_menu(self, restaurant_id: int) -> RowSet:
        """print the id/name table for a restaurant"""
        rows = self.dao.get_all_menu_by_restaurant(restaurant_id)
        print(MENU_TABLE_RULE)
        print("Menu ID\t\tMenu Name")
        print(MENU_TABLE_RULE)
        for row in rows:
            print(f"{row['menu_id']:<8d}\t{row['menu_name']:<30s}")
        print(MENU_TABLE_RULE)
        self._report_fetch_error(rows)
        return rows

    def list_menu(self, restaurant_id: str | None = None):
        """standalone entry for the id/name table"""
        rid = ask_int(restaurant_id, "Enter Restaurant ID: ", minimum=0)
        if rid is None:
            return
        return self.display_all_menu(rid)

# accounts
class UserManager:
    """account workflows; login state lives on the session the caller passes in"""
    def __init__(self, user_dao: UserDAO):
        self.dao = user_dao

    # session
    def login(self, session: Session, username: str | None = None, password: str | None = None) -> bool:
        """check credentials and load the account into the session"""
        username = ask_text(username, colored("username: ", "magenta"))
        password = ask_text(password, colored("password: ", "magenta"))
        if not self.dao.sign_in(username, password):
            cprint("invalid username or password", "red")
            return False
        session.user = self.dao.get_user(username)
        cprint(f"logged in as {colored(username, 'yellow', attrs=['bold'])}", "green")
        return True

    def logout(self, session: Session):
        """forget the logged-in user"""
        if session.user is not None:
            cprint(f"logged out {session.user.user_id}", "green")
        else:
            cprint("no user logged in", "yellow")
        session.user = None

    def whoami(self, session: Session):
        """print current user identity"""
        if session.user is None:
            cprint("no user currently logged in", "red"); return
        role = "manager console" if session.role is Role.MANAGER else "user console"
        cprint(f"you are logged in as {colored(session.user.user_id, 'yellow', attrs=['bold'])} ({role})", "green")

    # sign up
    def add_user(self, user: User) -> bool:
        return self.dao.add(user).ok

    def _prompt_new_user(self) -> User | None:
        """read every account field; none if the student id is not a number"""
        user_id = input("ID: ").strip()
        password = input("Password: ").strip()
        name = input("Name: ").strip()
        student_id = ask_int(None, "Student ID: ", minimum=0)
        if student_id is None:
            return None
        email = input("Email: ").strip()
        location = input("Location: ").strip()
        if not (user_id and password and name):
            cprint("id, password and name are required", "red")
            return None
        return User(user_id, password, name, student_id, email, location)

    def register(self):
        """interactive sign up"""
        cprint("\n=== Sign Up ===\n", "green", attrs=["bold"])
        user = self._prompt_new_user()
        if user is None:
            return False
        if self.add_user(user):
            cprint("account created, you can log in now", "green")
            return True
        cprint("Failed to create the account.", "red")
        return False

    def register_or_login(self, session: Session):
        """prompt user to pick register / login"""
        ans = input(f"would you like to ({colored('r','light_blue')})egister or ({colored('l','light_blue')})ogin?: ").strip().lower()
        if ans == "r":
            self.register()
        elif ans == "l":
            self.login(session)
        else:
            cprint("invalid option", "red")

    # self service
    def show_my_info(self, session: Session):
        """print the logged-in account as currently stored"""
        if session.user is None:
            cprint("please login first", "red"); return
        user = self.dao.get_user(session.user.user_id)
        if user is None:
            cprint("error fetching user info", "red"); return
        print("\n=== My Information ===\n")
        print(f"ID: {user.user_id}")
        print(f"Name: {user.name}")
        print(f"Student ID: {user.student_id}")
        print(f"Email: {user.email}")
        print(f"Location: {user.location}")
        print("\n======================")
        return user

    def search_other_user(self, user_id: str | None = None):
        """look up another account's public id and name"""
        user_id = ask_text(user_id, "Enter the user ID: ")
        other = self.dao.get_other_user(user_id)
        if other is None:
            print("The user could not be found..")
            return None
        print("\n== User Information ==\n")
        print(f"ID: {other.user_id}")
        print(f"Name: {other.name}")
        print("\n======================")
        return other

    def update(self, session: Session):
        """edit own account; blank answers keep the values held in the session"""
        current = session.user
        if current is None:
            cprint("please login first", "red"); return
        print("\n===== Update My information =====\n")
        user_id = input(f"New ID {SKIP_HINT}: ").strip() or current.user_id
        password = input(f"New Password {SKIP_HINT}: ").strip() or current.password
        name = input(f"New Name {SKIP_HINT}: ").strip() or current.name
        raw_student_id = input(f"New Student ID {SKIP_HINT}: ").strip()
        student_id = current.student_id
        if raw_student_id:
            student_id = safe_int(raw_student_id, minimum=0)
            if student_id is None:
                cprint("invalid student id", "red"); return
        email = input(f"New Email {SKIP_HINT}: ").strip() or current.email
        location = input(f"New Location {SKIP_HINT}: ").strip() or current.location

        updated = User(user_id, password, name, student_id, email, location)
        outcome = self.dao.update(updated, current.user_id)
        if outcome.ok:
            session.user = updated
            cprint("Update successful!", "green")
        else:
            cprint("Failed to update information.", "red")
        return outcome

    def delete_account(self, session: Session) -> bool:
        """withdraw own membership after confirmation and password re-entry"""
        if session.user is None:
            cprint("please login first", "red"); return False
        print("\nAre you sure you want to delete your account?")
        print("All data related to your account will be deleted.\n")
        confirm = input("Enter 'y' if you want to delete, or 'n': ").strip().lower()
        if confirm == "n":
            cprint("Membership withdrawal canceled.", "yellow")
            return False
        if confirm != "y":
            cprint("Invalid input. Membership withdrawal canceled.", "yellow")
            return False
        password = input("Please enter your PASSWORD: ").strip()
        outcome = self.dao.delete(session.user.user_id, password)
        if not outcome.ok:
            cprint("The password does not match.", "red")
            return False
        cprint("Membership withdrawal completed.", "green")
        session.user = None
        return True

    # manager views
    @staticmethod
    def _print_user_table(users: list[User]):
        print(f"{'ID':<15}{'Name':<15}{'Student ID':<15}{'Email':<25}{'Location':<15}")
        print(USER_TABLE_RULE)
        for u in users:
            print(f"{u.user_id:<15}{u.name:<15}{u.student_id:<15d}{u.email or '':<25}{u.location or '':<15}")

    def display_all_users(self):
        """manager listing of every account"""
        users = self.dao.get_all_users()
        print("\n=== All Users ===\n")
        self._print_user_table(users.rows)
        if users.error is not None:
            cprint(f"query failed: {users.error}", "red")
        return users

    def add_account_by_manager(self):
        """create any account"""
        print("\nEnter the new user information:")
        user = self._prompt_new_user()
        if user is None:
            return None
        outcome = self.dao.add(user)
        if outcome.ok:
            cprint("The new user has been successfully added.", "green")
        else:
            cprint("Failed to add the new user.", "red")
        return outcome

    def update_account_by_manager(self, user_id: str | None = None):
        """edit any account; blank answers keep the stored values"""
        user_id = ask_text(user_id, "\nEnter the ID of the user to update: ")
        target = self.dao.get_user(user_id)
        if target is None:
            cprint("User not found.", "red")
            return None
        password = input(f"New Password {SKIP_HINT}: ").strip() or target.password
        name = input(f"New Name {SKIP_HINT}: ").strip() or target.name
        raw_student_id = input(f"New Student ID {SKIP_HINT}: ").strip()
        student_id = target.student_id
        if raw_student_id:
            student_id = safe_int(raw_student_id, minimum=0)
            if student_id is None:
                cprint("invalid student id", "red"); return None
        email = input(f"New Email {SKIP_HINT}: ").strip() or target.email
        location = input(f"New Location {SKIP_HINT}: ").strip() or target.location

        outcome = self.dao.update(User(user_id, password, name, student_id, email, location), user_id)
        if outcome.ok:
            cprint("User information updated successfully!", "green")
        else:
            cprint("Failed to update user information.", "red")
        return outcome

    def search_account_by_manager(self, user_id: str | None = None):
        """full record of one account"""
        user_id = ask_text(user_id, "\nEnter the ID of the user to search: ")
        user = self.dao.get_user(user_id)
        if user is None:
            cprint("User not found.", "red")
            return None
        print("\n=== User Information ===\n")
        self._print_user_table([user])
        print("\n======================")
        return user

    def delete_account_by_manager(self, user_id: str | None = None, password: str | None = None):
        """delete any account, keyed by id and its password"""
        user_id = ask_text(user_id, "\nEnter the user ID you want to delete: ")
        password = ask_text(password, "Enter the password: ")
        outcome = self.dao.delete(user_id, password)
        if outcome.ok:
            cprint("The user account has been successfully deleted.", "green")
        elif outcome is Outcome.NOT_FOUND:
            cprint("The password does not match.", "red")
        else:
            cprint("An error occurred while deleting the user account.", "red")
        return outcome

# command infrastructure
class Command:
    """bind a command name to a function"""
    def __init__(self, name: str, function: Callable, description: str,
                 role: Role | None = Role.USER):
        self.name = name
        self._fn = function
        self.description = description
        self.role = role

    @property
    def usage(self) -> str:
        """'<required> [optional]' argument list for help and errors"""
        return " ".join(
            f"<{name}>" if p.default is inspect.Parameter.empty else f"[{name}]"
            for name, p in inspect.signature(self._fn).parameters.items()
        )

    def execute(self, tokens: list[str]):
        """bind tokens to the function's parameters and invoke it"""
        try:
            inspect.signature(self._fn).bind(*tokens)
        except TypeError:
            cprint(f"invalid args for '{self.name}', usage: {self.name} {self.usage}".rstrip(), "red")
            return
        return self._fn(*tokens)

class CommandParser:
    """simple repl parser

    role None: anyone; Role.USER: needs a logged-in account;
    Role.MANAGER: needs the manager console
    """
    def __init__(self, session: Session, user_manager: UserManager):
        self.session = session
        self.user_manager = user_manager
        self.commands: list[Command] = [
            Command("help", self.show_help, "show this help", None),
            Command("h", self.show_help, "alias help", None),
            Command("quit", self.quit, "exit program", None),
            Command("exit", lambda: cprint("use quit to exit", "yellow"), "alias quit", None),
        ]

    def _visible(self, cmd: Command) -> bool:
        return cmd.role is not Role.MANAGER or self.session.role is Role.MANAGER

    def parse_and_execute(self, input_str: str):
        """parse the raw input string and attempt to execute a command"""
        tokens = input_str.strip().split()
        if not tokens:
            return
        for cmd in self.commands:
            parts = cmd.name.split()
            if tokens[:len(parts)] != parts:
                continue
            if cmd.role is Role.MANAGER and self.session.role is not Role.MANAGER:
                cprint("manager console required (type 'console manager')", "red"); return
            if cmd.role is Role.USER and not self.session.logged_in:
                cprint("please login/register first", "yellow")
                self.user_manager.register_or_login(self.session)
                print("\n")
            if cmd.role is Role.USER and not self.session.logged_in:
                cprint("authentication required", "red"); return
            args = tokens[len(parts):]
            return cmd.execute(args)
        cprint("unknown command. type 'help'", "red")

    def show_help(self):
        """display help with all available command names and descriptions"""
        cprint("available commands:", "green", attrs=["bold"])
        width = max(len(c.name) for c in self.commands)
        for cmd in self.commands:
            if not self._visible(cmd):
                continue
            line = f"{colored(cmd.name,'blue')} {colored(cmd.usage,'cyan')}".strip()
            print(line.ljust(width + 25), "-", cmd.description)

    def quit(self):
        """confirm, then leave; a logged-in user is reminded they are still signed in"""
        who = f" ({self.session.user.user_id} is still logged in)" if self.session.logged_in else ""
        ans = input(colored(f"quit campus-eats{who}? (y/N): ", "yellow"))
        if parse_boolean_input(ans):
            cprint("bye, enjoy your meal!", "green")
            sys.exit(0)
        cprint("continuing...", "green")

    def _prompt(self) -> str:
        who = self.session.user.user_id if self.session.logged_in else "guest"
        role = "manager" if self.session.role is Role.MANAGER else "user"
        return colored(f"\n{who}@{role}> ", "blue")

    def start_repl(self):
        """read commands until eof; a database error ends the command, not the program"""
        while True:
            try:
                user_input = input(self._prompt()).strip()
            except EOFError:
                print()
                break
            if not user_input:
                continue
            try:
                self.parse_and_execute(user_input)
            except sqlite3.Error as e:
                cprint(f"database error: {e}", "red")

# application wiring
class Application:
    """bootstrap objects & build the command table"""
    def __init__(self, db_path: str = DB_PATH):
        self.db = DatabaseManager(db_path)
        atexit.register(lambda: self.db.conn.close() if self.db.conn else None)
        self.session = Session()
        self.menu_manager = MenuManager(MenuDAO(self.db))
        self.user_manager = UserManager(UserDAO(self.db))
        self.parser = CommandParser(self.session, self.user_manager)
        menus, users, s = self.menu_manager, self.user_manager, self.session

        # open commands
        self.parser.commands += [
            Command("console manager", self.enter_manager_console, "switch to the restaurant manager console", None),
            Command("console user", self.enter_user_console, "switch back to the user console", None),
            Command("account login", partial(users.login, s), "login", None),
            Command("account register", users.register, "create an account", None),
            Command("account logout", partial(users.logout, s), "logout", None),
            Command("account whoami", partial(users.whoami, s), "current user", None),
        ]

        # user commands
        self.parser.commands += [
            Command("account info", partial(users.show_my_info, s), "show my information"),
            Command("account update", partial(users.update, s), "update my information"),
            Command("account delete", partial(users.delete_account, s), "delete my account"),
            Command("user search", users.search_other_user, "look up another user"),
            Command("menu search", menus.search_by_users, "search menus by restaurant, name and price"),
            Command("menu restaurant", menus.search_menu_by_restaurant, "show a restaurant's menu"),
        ]

        # manager commands
        self.parser.commands += [
            Command("manager menu add", menus.add_menu, "add menu item", Role.MANAGER),
            Command("manager menu update", menus.update_menu, "update menu item", Role.MANAGER),
            Command("manager menu delete", menus.delete_menu, "delete menu item", Role.MANAGER),
            Command("manager menu search", menus.search_by_manager, "menu items with restaurant id", Role.MANAGER),
            Command("manager menu list", menus.list_menu, "menu id / name table", Role.MANAGER),
            Command("manager accounts list", users.display_all_users, "list accounts", Role.MANAGER),
            Command("manager accounts add", users.add_account_by_manager, "add account", Role.MANAGER),
            Command("manager accounts update", users.update_account_by_manager, "update account", Role.MANAGER),
            Command("manager accounts search", users.search_account_by_manager, "show account", Role.MANAGER),
            Command("manager accounts delete", users.delete_account_by_manager, "delete account", Role.MANAGER),
        ]

    def enter_manager_console(self):
        """switch the session to the manager console"""
        if self.session.role is Role.MANAGER:
            cprint("already in the manager console", "yellow"); return
        ans = input("switch to the restaurant manager console? (y/N): ")
        if parse_boolean_input(ans):
            self.session.role = Role.MANAGER
            cprint("manager console", "green")

    def enter_user_console(self):
        """switch the session back to the user console"""
        self.session.role = Role.USER
        cprint("user console", "green")

    def run(self, *args: str):
        """print the banner, run any command given on the command line, then the repl"""
        cprint("""
welcome to campus-eats 🍱
the campus food-ordering admin console
    """, "green", attrs=["bold"])

        print("""students browse menus and manage their accounts, restaurant managers keep menus and accounts up to date

for more information, type 'help' or 'h' at any time.
to exit the program, type 'quit'.""")

        if args:
            self.parser.parse_and_execute(" ".join(args))
        self.parser.start_repl()

# signal handler
def on_sigint(_signum, _frame):
    """ctrl+c leaves cleanly; the atexit hook still closes the database"""
    cprint("\ninterrupted, closing campus-eats (type 'quit' next time)", "yellow")
    sys.exit(130)

# entry point
def main():
    """entrypoint wrapper"""
    signal.signal(signal.SIGINT, on_sigint)
    Application().run(*sys.argv[1:])

if __name__ == "__main__":
    main()
