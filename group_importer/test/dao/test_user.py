# Copyright 2025 UW-IT, University of Washington
# SPDX-License-Identifier: Apache-2.0


from django.test import TestCase
from group_importer.dao.user import get_users
from group_importer.test import create_user


class GetUsersTest(TestCase):
    def setUp(self):
        self.javerage = create_user('javerage', idnumber='1033334')
        self.bill = create_user('bill', idnumber='1033334')
        self.jnew = create_user('jnew', idnumber='1000001')
        create_user('jgone', idnumber='1000001', is_deleted=True)

    def test_no_identifiers(self):
        self.assertEqual(get_users(), [])
        self.assertEqual(get_users(username='', idnumber=''), [])

    def test_by_username(self):
        self.assertEqual(get_users(username='javerage'), [self.javerage])
        self.assertEqual(get_users(username='nobody'), [])
        self.assertEqual(get_users(username='jgone'), [])

    def test_by_idnumber(self):
        self.assertEqual(get_users(idnumber='1033334'),
                         [self.bill, self.javerage])
        self.assertEqual(get_users(idnumber='1000001'), [self.jnew])

    def test_by_username_and_idnumber(self):
        self.assertEqual(get_users(username='bill', idnumber='1033334'),
                         [self.bill])
        self.assertEqual(get_users(username='jnew', idnumber='1033334'), [])
