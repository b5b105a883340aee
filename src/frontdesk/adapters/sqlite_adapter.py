from __future__ import annotations

import sqlite3
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from frontdesk.exceptions import DatabaseError

logger = logging.getLogger(__name__)

_BOOKING_FIELDS = (
    "room_id", "room_number", "guest_name", "check_in", "check_out",
    "num_persons", "payment_status", "booking_date",
)
_PAYMENT_FIELDS = (
    "booking_id", "room_id", "room_number", "amount", "mode", "payment_date",
)


class SQLiteFrontDeskAdapter:
    """SQLite storage for rooms, bookings and payments."""

    def __init__(self, db_url: str):
        # Format: sqlite:///path
        if db_url.startswith("sqlite:///"):
            self.db_path = db_url.replace("sqlite:///", "")
        else:
            self.db_path = db_url

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"SQLiteFrontDeskAdapter started. Database path: {self.db_path}")

    def _conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            return conn
        except sqlite3.Error as e:
            logger.error(f"Database connection error: {e}")
            raise DatabaseError(f"Could not connect to database: {e}") from e

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def init(self) -> None:
        """Creates the tables if they do not exist yet."""
        logger.info("Checking/creating database tables...")
        try:
            with self._conn() as conn:
                cur = conn.cursor()

                # room_number is deliberately not UNIQUE: legacy data holds duplicates
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS rooms (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        room_number TEXT NOT NULL,
                        status TEXT NOT NULL DEFAULT 'Available',
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                    )
                    """
                )
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS bookings (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        room_id INTEGER,
                        room_number TEXT NOT NULL,
                        guest_name TEXT NOT NULL,
                        check_in TEXT,
                        check_out TEXT,
                        num_persons INTEGER NOT NULL DEFAULT 1,
                        payment_status TEXT NOT NULL DEFAULT 'Pending',
                        booking_date TEXT,
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                        FOREIGN KEY(room_id) REFERENCES rooms(id)
                    )
                    """
                )
                cur.execute(
                    """
                    CREATE TABLE IF NOT EXISTS payments (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        booking_id INTEGER,
                        room_id INTEGER,
                        room_number TEXT,
                        amount REAL NOT NULL,
                        mode TEXT NOT NULL,
                        payment_date TEXT,
                        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                        FOREIGN KEY(booking_id) REFERENCES bookings(id)
                    )
                    """
                )
                conn.commit()
                logger.info("Table initialisation completed.")
        except sqlite3.Error as e:
            logger.error(f"SQLite error during table initialisation: {e}")
            raise DatabaseError(f"Table initialisation failed: {e}") from e

    # ------------------------------------
    # Helpers
    # ------------------------------------
    def _get_by_id(self, table_name: str, id_value: int) -> Optional[Dict[str, Any]]:
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute(f"SELECT * FROM {table_name} WHERE id = ?", (id_value,))
                row = cur.fetchone()
                return dict(row) if row else None
        except sqlite3.Error as e:
            logger.error(f"Error reading ID:{id_value} from {table_name}: {e}")
            return None

    def _list_all(self, table_name: str, where_clause: Optional[str] = None, params: Optional[tuple] = None) -> List[Dict[str, Any]]:
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                query = f"SELECT * FROM {table_name}"
                if where_clause:
                    query += f" WHERE {where_clause}"
                query += " ORDER BY id"
                cur.execute(query, params or ())
                return [dict(r) for r in cur.fetchall()]
        except sqlite3.Error as e:
            logger.error(f"Error listing {table_name}: {e}")
            return []

    @staticmethod
    def _insert_row(cur: sqlite3.Cursor, table_name: str, data: Dict[str, Any]) -> int:
        fields = ', '.join(data.keys())
        placeholders = ', '.join('?' * len(data))
        cur.execute(f"INSERT INTO {table_name} ({fields}) VALUES ({placeholders})", tuple(data.values()))
        return cur.lastrowid

    def _insert(self, table_name: str, data: Dict[str, Any]) -> Dict[str, Any]:
        with self._conn() as conn:
            new_id = self._insert_row(conn.cursor(), table_name, data)
            conn.commit()
        return self._get_by_id(table_name, new_id) or {"id": new_id}

    @staticmethod
    def _pick(data: Dict[str, Any], allowed: tuple) -> Dict[str, Any]:
        return {k: data[k] for k in allowed if k in data}

    # ------------------------------------
    # Rooms
    # ------------------------------------
    def create_room(self, room_number: str, status: str = "Available") -> Dict[str, Any]:
        logger.info(f"Creating room {room_number}")
        try:
            return self._insert("rooms", {"room_number": str(room_number).strip(), "status": status})
        except sqlite3.Error as e:
            logger.error(f"Room creation error: {e}")
            raise DatabaseError(f"Could not create room: {e}") from e

    def get_room(self, room_id: int) -> Optional[Dict[str, Any]]:
        return self._get_by_id("rooms", room_id)

    def find_room_by_number(self, room_number: str) -> Optional[Dict[str, Any]]:
        rooms = self._list_all("rooms", "room_number = ?", (str(room_number).strip(),))
        return rooms[0] if rooms else None

    def list_rooms(self) -> List[Dict[str, Any]]:
        return self._list_all("rooms")

    # ------------------------------------
    # Bookings
    # ------------------------------------
    def create_booking(self, data: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Creating booking for {data.get('guest_name')} in room {data.get('room_number')}")
        try:
            return self._insert("bookings", self._pick(data, _BOOKING_FIELDS))
        except sqlite3.Error as e:
            logger.error(f"Booking creation error: {e}")
            raise DatabaseError(f"Could not save booking: {e}") from e

    def get_booking(self, booking_id: int) -> Optional[Dict[str, Any]]:
        return self._get_by_id("bookings", booking_id)

    def list_bookings(self) -> List[Dict[str, Any]]:
        return self._list_all("bookings")

    def list_bookings_for_room(self, room_number: str) -> List[Dict[str, Any]]:
        return self._list_all("bookings", "room_number = ?", (str(room_number).strip(),))

    def update_booking(self, booking_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        data = self._pick(data, _BOOKING_FIELDS)
        if not data:
            return self.get_booking(booking_id)
        logger.info(f"Updating booking ID:{booking_id}: {list(data.keys())}")
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                set_clause = ', '.join([f"{k} = ?" for k in data.keys()])
                values = tuple(data.values()) + (booking_id,)
                cur.execute(f"UPDATE bookings SET {set_clause} WHERE id = ?", values)
                conn.commit()
            return self.get_booking(booking_id)
        except sqlite3.Error as e:
            logger.error(f"Booking update error: {e}")
            raise DatabaseError(f"Could not update booking {booking_id}: {e}") from e

    def delete_booking(self, booking_id: int) -> bool:
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute("DELETE FROM bookings WHERE id = ?", (booking_id,))
                conn.commit()
                return cur.rowcount > 0
        except sqlite3.Error as e:
            logger.error(f"Booking delete error: {e}")
            raise DatabaseError(f"Could not delete booking {booking_id}: {e}") from e

    # ------------------------------------
    # Payments
    # ------------------------------------
    def create_payment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Recording payment of {data.get('amount')} via {data.get('mode')}")
        try:
            return self._insert("payments", self._pick(data, _PAYMENT_FIELDS))
        except sqlite3.Error as e:
            logger.error(f"Payment creation error: {e}")
            raise DatabaseError(f"Could not save payment: {e}") from e

    def list_payments(self) -> List[Dict[str, Any]]:
        return self._list_all("payments")

    def list_payments_for_booking(self, booking_id: int) -> List[Dict[str, Any]]:
        return self._list_all("payments", "booking_id = ?", (booking_id,))

    def delete_payments_for_booking(self, booking_id: int) -> int:
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute("DELETE FROM payments WHERE booking_id = ?", (booking_id,))
                conn.commit()
                return cur.rowcount
        except sqlite3.Error as e:
            logger.error(f"Payment delete error: {e}")
            raise DatabaseError(f"Could not delete payments for booking {booking_id}: {e}") from e

    # ------------------------------------
    # Transactions
    # ------------------------------------
    # Each of these runs in a single transaction: either every row is written
    # or none is.
    def create_booking_with_payment(
        self, booking: Dict[str, Any], payment: Dict[str, Any]
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Inserts a booking and its first payment, linking the payment to the new booking."""
        logger.info(f"Creating booking for {booking.get('guest_name')} in room {booking.get('room_number')} with payment")
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                booking_id = self._insert_row(cur, "bookings", self._pick(booking, _BOOKING_FIELDS))
                payment = dict(payment, booking_id=booking_id)
                payment_id = self._insert_row(cur, "payments", self._pick(payment, _PAYMENT_FIELDS))
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Booking creation error, nothing was saved: {e}")
            raise DatabaseError(f"Could not save booking: {e}") from e

        saved_booking = self.get_booking(booking_id) or {"id": booking_id}
        saved_payment = self._get_by_id("payments", payment_id) or {"id": payment_id}
        return saved_booking, saved_payment

    def settle_booking(
        self, booking_id: int, payment: Dict[str, Any], payment_status: str
    ) -> Optional[Tuple[Dict[str, Any], Dict[str, Any]]]:
        """
        Records a payment against a booking and updates its payment status.

        Returns:
            (booking, payment), or None when the booking does not exist
        """
        logger.info(f"Settling booking ID:{booking_id} with {payment.get('amount')} via {payment.get('mode')}")
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute("UPDATE bookings SET payment_status = ? WHERE id = ?", (payment_status, booking_id))
                if cur.rowcount == 0:
                    conn.rollback()
                    return None
                payment = dict(payment, booking_id=booking_id)
                payment_id = self._insert_row(cur, "payments", self._pick(payment, _PAYMENT_FIELDS))
                conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Payment error, nothing was saved: {e}")
            raise DatabaseError(f"Could not settle booking {booking_id}: {e}") from e

        saved_booking = self.get_booking(booking_id) or {"id": booking_id}
        saved_payment = self._get_by_id("payments", payment_id) or {"id": payment_id}
        return saved_booking, saved_payment

    def delete_booking_cascade(self, booking_id: int) -> Optional[int]:
        """
        Deletes a booking together with its payments.

        Returns:
            Number of payments removed, or None when the booking does not exist
        """
        logger.info(f"Deleting booking ID:{booking_id} and its payments")
        try:
            with self._conn() as conn:
                cur = conn.cursor()
                cur.execute("DELETE FROM payments WHERE booking_id = ?", (booking_id,))
                removed_payments = cur.rowcount
                cur.execute("DELETE FROM bookings WHERE id = ?", (booking_id,))
                if cur.rowcount == 0:
                    conn.rollback()
                    return None
                conn.commit()
                return removed_payments
        except sqlite3.Error as e:
            logger.error(f"Booking delete error, nothing was removed: {e}")
            raise DatabaseError(f"Could not delete booking {booking_id}: {e}") from e
