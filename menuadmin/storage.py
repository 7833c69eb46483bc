from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from menuadmin.models.entities import Menu, MenuProfile, Module, Profile, Screen, Status
from menuadmin.models.menu_tree import MenuProfileRow


class MenuAdminStore:
    """Persists modules, screens, profiles, menus and their profile assignments in SQLite."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize()

    @contextmanager
    def _session(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys=ON;")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _initialize(self) -> None:
        with self._session() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS modulos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    nombre TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS pantallas (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    cod_modulo INTEGER NOT NULL REFERENCES modulos(id),
                    nombre TEXT NOT NULL,
                    url TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS perfiles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    nombre TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS menus (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    nombre TEXT NOT NULL,
                    jerarquia INTEGER NOT NULL,
                    orden INTEGER NOT NULL,
                    cod_pantalla INTEGER REFERENCES pantallas(id),
                    cod_modulo INTEGER REFERENCES modulos(id),
                    cod_menu_padre INTEGER REFERENCES menus(id),
                    icono TEXT,
                    estado INTEGER NOT NULL DEFAULT 1
                );

                CREATE TABLE IF NOT EXISTS menu_perfil (
                    menu_id INTEGER NOT NULL REFERENCES menus(id) ON DELETE CASCADE,
                    perfil_id INTEGER NOT NULL REFERENCES perfiles(id) ON DELETE CASCADE,
                    PRIMARY KEY (menu_id, perfil_id)
                );

                CREATE INDEX IF NOT EXISTS idx_menu_perfil_perfil ON menu_perfil(perfil_id);

                CREATE VIEW IF NOT EXISTS vw_menu_perfil AS
                SELECT mp.menu_id AS id_menu,
                       mp.perfil_id AS id_perfil,
                       m.nombre AS nombre,
                       m.jerarquia AS jerarq,
                       m.cod_menu_padre AS menu_padre,
                       m.orden AS orden,
                       p.url AS url
                FROM menu_perfil mp
                JOIN menus m ON m.id = mp.menu_id
                LEFT JOIN pantallas p ON p.id = m.cod_pantalla
                WHERE m.estado = 1;
                """
            )

    # ------------------------------------------------------------------ modules
    def create_module(self, module: Module) -> Module:
        with self._session() as conn:
            cursor = conn.execute("INSERT INTO modulos(nombre) VALUES (?)", (module.name,))
            return Module(id=cursor.lastrowid, name=module.name)

    def get_module(self, module_id: int) -> Optional[Module]:
        with self._session() as conn:
            row = conn.execute("SELECT * FROM modulos WHERE id = ?", (module_id,)).fetchone()
        return Module(id=row["id"], name=row["nombre"]) if row else None

    def list_modules(self) -> List[Module]:
        with self._session() as conn:
            rows = conn.execute("SELECT * FROM modulos ORDER BY id").fetchall()
        return [Module(id=row["id"], name=row["nombre"]) for row in rows]

    def update_module(self, module_id: int, module: Module) -> Optional[Module]:
        with self._session() as conn:
            cursor = conn.execute("UPDATE modulos SET nombre = ? WHERE id = ?", (module.name, module_id))
        if cursor.rowcount == 0:
            return None
        return Module(id=module_id, name=module.name)

    def delete_module(self, module_id: int) -> bool:
        with self._session() as conn:
            cursor = conn.execute("DELETE FROM modulos WHERE id = ?", (module_id,))
        return cursor.rowcount > 0

    # ------------------------------------------------------------------ screens
    def create_screen(self, screen: Screen) -> Screen:
        with self._session() as conn:
            cursor = conn.execute(
                "INSERT INTO pantallas(cod_modulo, nombre, url) VALUES (?, ?, ?)",
                (screen.module_id, screen.name, screen.url),
            )
            new_id = cursor.lastrowid
        return Screen(id=new_id, module_id=screen.module_id, name=screen.name, url=screen.url)

    def get_screen(self, screen_id: int) -> Optional[Screen]:
        with self._session() as conn:
            row = conn.execute("SELECT * FROM pantallas WHERE id = ?", (screen_id,)).fetchone()
        return self._row_to_screen(row) if row else None

    def list_screens(self) -> List[Screen]:
        with self._session() as conn:
            rows = conn.execute("SELECT * FROM pantallas ORDER BY id").fetchall()
        return [self._row_to_screen(row) for row in rows]

    def update_screen(self, screen_id: int, screen: Screen) -> Optional[Screen]:
        with self._session() as conn:
            cursor = conn.execute(
                "UPDATE pantallas SET cod_modulo = ?, nombre = ?, url = ? WHERE id = ?",
                (screen.module_id, screen.name, screen.url, screen_id),
            )
        if cursor.rowcount == 0:
            return None
        return Screen(id=screen_id, module_id=screen.module_id, name=screen.name, url=screen.url)

    def delete_screen(self, screen_id: int) -> bool:
        with self._session() as conn:
            cursor = conn.execute("DELETE FROM pantallas WHERE id = ?", (screen_id,))
        return cursor.rowcount > 0

    # ------------------------------------------------------------------ profiles
    def create_profile(self, profile: Profile) -> Profile:
        with self._session() as conn:
            cursor = conn.execute("INSERT INTO perfiles(nombre) VALUES (?)", (profile.name,))
            return Profile(id=cursor.lastrowid, name=profile.name)

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        with self._session() as conn:
            row = conn.execute("SELECT * FROM perfiles WHERE id = ?", (profile_id,)).fetchone()
        return Profile(id=row["id"], name=row["nombre"]) if row else None

    def list_profiles(self) -> List[Profile]:
        with self._session() as conn:
            rows = conn.execute("SELECT * FROM perfiles ORDER BY id").fetchall()
        return [Profile(id=row["id"], name=row["nombre"]) for row in rows]

    def update_profile(self, profile_id: int, profile: Profile) -> Optional[Profile]:
        with self._session() as conn:
            cursor = conn.execute("UPDATE perfiles SET nombre = ? WHERE id = ?", (profile.name, profile_id))
        if cursor.rowcount == 0:
            return None
        return Profile(id=profile_id, name=profile.name)

    def delete_profile(self, profile_id: int) -> bool:
        with self._session() as conn:
            cursor = conn.execute("DELETE FROM perfiles WHERE id = ?", (profile_id,))
        return cursor.rowcount > 0

    # ------------------------------------------------------------------ menus
    def create_menu(self, menu: Menu) -> Menu:
        with self._session() as conn:
            cursor = conn.execute(
                """
                INSERT INTO menus(nombre, jerarquia, orden, cod_pantalla, cod_modulo, cod_menu_padre, icono, estado)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                self._menu_params(menu),
            )
            new_id = cursor.lastrowid
        return self._with_id(menu, new_id)

    def get_menu(self, menu_id: int) -> Optional[Menu]:
        with self._session() as conn:
            row = conn.execute("SELECT * FROM menus WHERE id = ?", (menu_id,)).fetchone()
        return self._row_to_menu(row) if row else None

    def list_menus(self) -> List[Menu]:
        with self._session() as conn:
            rows = conn.execute("SELECT * FROM menus ORDER BY jerarquia, orden, id").fetchall()
        return [self._row_to_menu(row) for row in rows]

    def update_menu(self, menu_id: int, menu: Menu) -> Optional[Menu]:
        with self._session() as conn:
            cursor = conn.execute(
                """
                UPDATE menus
                SET nombre = ?, jerarquia = ?, orden = ?, cod_pantalla = ?, cod_modulo = ?,
                    cod_menu_padre = ?, icono = ?, estado = ?
                WHERE id = ?
                """,
                (*self._menu_params(menu), menu_id),
            )
        if cursor.rowcount == 0:
            return None
        return self._with_id(menu, menu_id)

    def delete_menu(self, menu_id: int) -> bool:
        with self._session() as conn:
            cursor = conn.execute("DELETE FROM menus WHERE id = ?", (menu_id,))
        return cursor.rowcount > 0

    # ------------------------------------------------------------------ assignments
    def assign_menu(self, assignment: MenuProfile) -> MenuProfile:
        with self._session() as conn:
            conn.execute(
                "INSERT INTO menu_perfil(menu_id, perfil_id) VALUES (?, ?)",
                (assignment.menu_id, assignment.profile_id),
            )
        return assignment

    def get_assignment(self, menu_id: int, profile_id: int) -> Optional[MenuProfile]:
        with self._session() as conn:
            row = conn.execute(
                "SELECT * FROM menu_perfil WHERE menu_id = ? AND perfil_id = ?",
                (menu_id, profile_id),
            ).fetchone()
        return MenuProfile(menu_id=row["menu_id"], profile_id=row["perfil_id"]) if row else None

    def list_assignments(self, profile_id: int) -> List[MenuProfile]:
        with self._session() as conn:
            rows = conn.execute(
                "SELECT * FROM menu_perfil WHERE perfil_id = ? ORDER BY menu_id",
                (profile_id,),
            ).fetchall()
        return [MenuProfile(menu_id=row["menu_id"], profile_id=row["perfil_id"]) for row in rows]

    def remove_assignment(self, menu_id: int, profile_id: int) -> bool:
        with self._session() as conn:
            cursor = conn.execute(
                "DELETE FROM menu_perfil WHERE menu_id = ? AND perfil_id = ?",
                (menu_id, profile_id),
            )
        return cursor.rowcount > 0

    def list_menu_profile_rows(self, profile_id: int) -> List[MenuProfileRow]:
        """Flattened active menus visible to ``profile_id``, in menu id order."""

        with self._session() as conn:
            rows = conn.execute(
                "SELECT * FROM vw_menu_perfil WHERE id_perfil = ? ORDER BY id_menu",
                (profile_id,),
            ).fetchall()
        return [
            MenuProfileRow(
                menu_id=row["id_menu"],
                profile_id=row["id_perfil"],
                name=row["nombre"],
                hierarchy_level=row["jerarq"],
                parent_menu_id=row["menu_padre"],
                order=row["orden"],
                url=row["url"],
            )
            for row in rows
        ]

    # ------------------------------------------------------------------ helpers
    @staticmethod
    def _menu_params(menu: Menu) -> tuple:
        return (
            menu.name,
            menu.hierarchy,
            menu.order,
            menu.screen_id,
            menu.module_id,
            menu.parent_id,
            menu.icon,
            int(menu.status),
        )

    @staticmethod
    def _with_id(menu: Menu, menu_id: int) -> Menu:
        return Menu(
            id=menu_id,
            name=menu.name,
            hierarchy=menu.hierarchy,
            order=menu.order,
            module_id=menu.module_id,
            icon=menu.icon,
            status=menu.status,
            screen_id=menu.screen_id,
            parent_id=menu.parent_id,
        )

    @staticmethod
    def _row_to_screen(row: sqlite3.Row) -> Screen:
        return Screen(id=row["id"], module_id=row["cod_modulo"], name=row["nombre"], url=row["url"])

    @staticmethod
    def _row_to_menu(row: sqlite3.Row) -> Menu:
        return Menu(
            id=row["id"],
            name=row["nombre"],
            hierarchy=int(row["jerarquia"]),
            order=int(row["orden"]),
            module_id=row["cod_modulo"],
            icon=row["icono"],
            status=Status.from_code(row["estado"]),
            screen_id=row["cod_pantalla"],
            parent_id=row["cod_menu_padre"],
        )


__all__ = ["MenuAdminStore"]
